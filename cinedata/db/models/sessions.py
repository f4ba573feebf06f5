from .base import BaseDocument


class Session(BaseDocument):
    user_id: str
    jwt: str
