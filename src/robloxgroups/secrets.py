from os import environ as env
from . import config


VALID_SECRETS = ("ROBLOX_API_KEY",)



for secret in VALID_SECRETS:
    globals()[secret] = env.get(secret) or getattr(config, secret, "")
