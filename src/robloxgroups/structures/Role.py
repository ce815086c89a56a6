import dateutil.parser as parser


class Role:
    """A role inside a Roblox group, built from one entry of a groupRoles page"""

    __slots__ = ("id", "rank", "path", "display_name", "description",
                 "member_count", "permissions", "created", "updated", "raw")

    def __init__(self, role_json):
        self.raw = role_json

        self.id = int(role_json["id"])
        self.rank = int(role_json["rank"])

        self.path = role_json.get("path")
        self.display_name = role_json.get("displayName")
        self.description = role_json.get("description")
        self.member_count = role_json.get("memberCount")
        self.permissions = role_json.get("permissions")

        self.created = self.parse_time(role_json.get("createTime"))
        self.updated = self.parse_time(role_json.get("updateTime"))

    @staticmethod
    def parse_time(timestamp):
        if not timestamp:
            return None

        try:
            return parser.isoparse(timestamp)
        except (TypeError, ValueError, OverflowError):
            return None

    def __str__(self):
        return f"{self.display_name} ({self.rank})"

    def __repr__(self):
        return f"Role(id={self.id}, rank={self.rank})"

    def __eq__(self, other):
        return self.id == getattr(other, "id", -1)

    def __hash__(self):
        return hash(self.id)
