class RequestResult:
    __slots__ = ("status", "body")

    def __init__(self, status, body=None):
        self.status = status
        self.body = body

    @property
    def ok(self):
        return self.status == 200

    def __repr__(self):
        return f"RequestResult(status={self.status}, body={self.body!r})"
