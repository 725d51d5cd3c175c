"""
Base repository.
Generic read operations over a SQLModel table.
"""
from typing import TypeVar, Generic, List, Type
from sqlmodel import Session, select, func

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic base repository.

    Usage:
        class MyRepository(BaseRepository[MyModel]):
            def __init__(self, session: Session):
                super().__init__(session, MyModel)
    """

    def __init__(self, session: Session, model: Type[T]):
        """
        Args:
            session: Database session
            model: SQLModel table class
        """
        self.session = session
        self.model = model

    def get_all(self) -> List[T]:
        """Returns every row."""
        return list(self.session.exec(select(self.model)).all())

    def count(self) -> int:
        """Counts every row."""
        result = self.session.exec(
            select(func.count()).select_from(self.model)
        ).first()
        return result or 0
