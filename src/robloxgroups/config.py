# values set here are used when the matching environment variable is unset


ROBLOX_API_KEY = "" # Open Cloud API key with the group:read and group:write scopes
