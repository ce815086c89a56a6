API_URL = "https://apis.roblox.com/cloud/v2"
API_KEY_HEADER = "x-api-key"

ALLOWED_METHODS = ("GET", "POST", "PATCH")

ROLES_PAGE_SIZE = 20

MIN_RANK = 0
MAX_RANK = 255

ERROR_BODY_LOG_LIMIT = 200 # characters of a failed response body that get logged
