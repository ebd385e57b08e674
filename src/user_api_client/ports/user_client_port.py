from abc import ABC, abstractmethod

from ..domain.user import User


class UserClientPort(ABC):
    """Port for user management service operations"""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Create a user, returning the server's copy"""
        pass

    @abstractmethod
    def update_user(self, user_id: str, user: User) -> User:
        """Replace the user identified by user_id"""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> User:
        """Get a user by ID"""
        pass


class AsyncUserClientPort(ABC):
    """Port for user management service operations, async flavour"""

    @abstractmethod
    async def create_user(self, user: User) -> User:
        """Create a user, returning the server's copy"""
        pass

    @abstractmethod
    async def update_user(self, user_id: str, user: User) -> User:
        """Replace the user identified by user_id"""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> User:
        """Get a user by ID"""
        pass
