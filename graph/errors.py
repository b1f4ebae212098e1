class NotFoundError(Exception):
    """Raised by a mutation whose target entity does not exist"""

    def __init__(self, message: str):
        super().__init__(message)
        # picked up by graphql-core when building the error entry
        self.extensions = {"code": "NOT_FOUND"}
