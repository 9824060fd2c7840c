from sqlmodel import Session, select, col
from sqlalchemy import func
from qod.repositories.models import Source, SourceCreate, SourceRead
from qod.repositories.interfaces import SourceRepositoryInterface


class SourceRepository(SourceRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def add(self, source: SourceCreate) -> SourceRead:
        # Source names are unique regardless of case
        existing_source = self.find_by_name(source.name)
        if existing_source:
            return existing_source

        db_source = Source.model_validate(source)
        self.session.add(db_source)
        self.session.commit()
        self.session.refresh(db_source)
        return SourceRead.model_validate(db_source)

    def get(self, source_id: int) -> SourceRead | None:
        source = self.session.get(Source, source_id)
        return SourceRead.model_validate(source) if source else None

    def find_by_name(self, name: str) -> SourceRead | None:
        statement = select(Source).where(func.lower(Source.name) == name.lower())
        source = self.session.exec(statement).first()
        return SourceRead.model_validate(source) if source else None

    def list_sources(self) -> list[SourceRead]:
        statement = select(Source).order_by(func.lower(Source.name))
        sources = self.session.exec(statement).all()
        return [SourceRead.model_validate(source) for source in sources]

    def search(self, fragment: str) -> list[SourceRead]:
        statement = (
            select(Source)
            .where(col(Source.name).icontains(fragment, autoescape=True))
            .order_by(func.lower(Source.name))
        )
        sources = self.session.exec(statement).all()
        return [SourceRead.model_validate(source) for source in sources]

    def get_by_ids(self, source_ids: list[int]) -> list[SourceRead]:
        statement = (
            select(Source)
            .where(col(Source.id).in_(source_ids))
            .order_by(func.lower(Source.name))
        )
        sources = self.session.exec(statement).all()
        return [SourceRead.model_validate(source) for source in sources]

    def rename(self, source_id: int, name: str) -> SourceRead | None:
        source = self.session.get(Source, source_id)
        if not source:
            return None
        source.name = name
        self.session.add(source)
        self.session.commit()
        self.session.refresh(source)
        return SourceRead.model_validate(source)

    def delete(self, source_id: int) -> None:
        source = self.session.get(Source, source_id)
        if not source:
            return
        self.session.delete(source)
        self.session.commit()
