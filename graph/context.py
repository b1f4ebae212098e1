from typing import Optional

from strawberry.fastapi import BaseContext

from dependencies import Auth, Store
from models.user import Caller
from services.auth_gate import AuthResult
from services.store import DatasetStore


class GraphContext(BaseContext):
    """Per-request state handed to every resolver as info.context"""

    def __init__(self, store: DatasetStore, auth: AuthResult):
        super().__init__()
        self.store = store
        self.auth = auth

    @property
    def caller(self) -> Optional[Caller]:
        """Verified caller, None for anonymous requests and rejected tokens"""
        return self.auth.caller


async def get_context(store: Store, auth: Auth) -> GraphContext:
    return GraphContext(store=store, auth=auth)
