from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.user import User


class UserDAO(BaseDAO[User]):
    model = User

    async def list_by_role(self, role: str) -> list[User]:
        return await self._fetch(select(User).where(User.role == role).order_by(User.id))
