from ..structures import Role
from ..exceptions import RobloxException, RobloxAPIError, RobloxNotFound, MissingAPIKey
from ..constants import API_URL, API_KEY_HEADER, ROLES_PAGE_SIZE, MIN_RANK, MAX_RANK
from .. import secrets
from .utils import fetch, raise_for_result
from requests.structures import CaseInsensitiveDict
from urllib.parse import quote_plus
import logging


log = logging.getLogger(__name__)



class GroupClient:
    """
    Client for the group endpoints of Roblox Open Cloud v2.

    Failures never raise by default: list_group_roles and get_role_id_from_rank
    return None, set_user_group_role returns False. Pass raise_on_failure=True
    to get the underlying RobloxException instead.
    """

    __slots__ = ("_api_key",)

    def __init__(self, api_key):
        if not api_key or not isinstance(api_key, str):
            raise MissingAPIKey("An Open Cloud API key is required")

        self._api_key = api_key

    @classmethod
    def from_secrets(cls):
        api_key = getattr(secrets, "ROBLOX_API_KEY", "")

        if not api_key:
            raise MissingAPIKey("ROBLOX_API_KEY is not set")

        return cls(api_key)

    @property
    def api_key(self):
        return self._api_key

    def _request(self, uri, headers=None, method="GET", data=None):
        # caller headers replace the defaults, names compared case-insensitively
        request_headers = CaseInsensitiveDict({
            API_KEY_HEADER: self._api_key,
            "Content-Type": "application/json"
        })
        request_headers.update(headers or {})

        return fetch(f"{API_URL}/{uri}", method=method, headers=request_headers, body=data)

    def _iter_role_pages(self, group_id):
        """Yields the roles of each page in order. Raises on the first bad page."""

        page_token = None
        page_number = 0

        while True:
            query = f"groups/{group_id}/roles?maxPageSize={ROLES_PAGE_SIZE}"

            if page_token:
                query += f"&pageToken={quote_plus(str(page_token))}"

            result = self._request(query)
            page_number += 1

            raise_for_result(result, f"Page {page_number} of group {group_id} roles returned {result.status}")

            body = result.body
            role_data = body.get("groupRoles") if isinstance(body, dict) else None

            if not isinstance(role_data, list):
                raise RobloxAPIError(f"Page {page_number} of group {group_id} roles has no groupRoles", status=result.status)

            try:
                roles = [Role(role_json) for role_json in role_data]
            except (KeyError, TypeError, ValueError) as e:
                raise RobloxAPIError(f"Page {page_number} of group {group_id} roles has a malformed role: {e}", status=result.status) from e

            log.debug("Group %s roles page %s: %s roles", group_id, page_number, len(roles))

            yield roles

            page_token = body.get("nextPageToken")

            if not page_token:
                return

    def list_group_roles(self, group_id, *, raise_on_failure=False):
        """Returns every role of the group in page order, or None if any page fails"""

        roles = []

        try:
            for page in self._iter_role_pages(group_id):
                roles.extend(page)

        except RobloxException as e:
            if raise_on_failure:
                raise

            log.warning("Could not list the roles of group %s: %s", group_id, e.message)

            return None

        return roles

    def get_role_id_from_rank(self, group_id, rank, *, raise_on_failure=False):
        """
        Returns the id of the first role (in page order) whose rank equals `rank`.

        Stops fetching pages once a match is found. Returns None if a page
        fails or no role has that rank.
        """

        if not MIN_RANK <= rank <= MAX_RANK:
            log.warning("Rank %s is outside of %s-%s", rank, MIN_RANK, MAX_RANK)

        try:
            for page in self._iter_role_pages(group_id):
                for role in page:
                    if role.rank == rank:
                        return role.id

            raise RobloxNotFound(f"Group {group_id} has no role with rank {rank}")

        except RobloxException as e:
            if raise_on_failure:
                raise

            log.warning("Could not resolve rank %s in group %s: %s", rank, group_id, e.message)

            return None

    def set_user_group_role(self, group_id, user_id, rank, *, raise_on_failure=False):
        """
        Gives the member the role that has the given rank.

        The rank is resolved first; if that fails no update is sent.
        Returns True only when Roblox answers the update with status 200.
        """

        role_id = self.get_role_id_from_rank(group_id, rank, raise_on_failure=raise_on_failure)

        if role_id is None:
            return False

        try:
            result = self._request(f"groups/{group_id}/memberships/{user_id}", method="PATCH", data={
                "role": f"groups/{group_id}/roles/{role_id}"
            })

            raise_for_result(result, f"Updating user {user_id} in group {group_id} returned {result.status}")

        except RobloxException as e:
            if raise_on_failure:
                raise

            log.warning("Could not set user %s to rank %s in group %s: %s", user_id, rank, group_id, e.message)

            return False

        log.debug("Set user %s to role %s (rank %s) in group %s", user_id, role_id, rank, group_id)

        return True

    def __repr__(self):
        return "GroupClient(api_key='***')"
