"""Shared fixtures: in-memory database, session and model factory."""

from typing import Optional

import pytest
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from constants import MediaType, PenaltyMediaType
from database.models import (
    Base,
    ListPenalty,
    MediaList,
    Penalty,
    PenaltyApplication,
    RankedList,
    RankingConfiguration,
)
from repositories import RankedListRepository


class ModelFactory:
    """Creates and commits rows for weight calculation scenarios."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._names = 0

    def _next_name(self, prefix: str) -> str:
        self._names += 1
        return f"{prefix} {self._names}"

    async def _save(self, entity):
        self.session.add(entity)
        await self.session.commit()
        return entity

    async def configuration(self, **attrs) -> RankingConfiguration:
        attrs.setdefault("name", self._next_name("Configuration"))
        attrs.setdefault("media_type", MediaType.MUSIC.value)
        attrs.setdefault("algorithm_version", 1)
        attrs.setdefault("exponent", 2.0)
        attrs.setdefault("bonus_pool_percentage", 10.0)
        attrs.setdefault("min_list_weight", 1)
        return await self._save(RankingConfiguration(**attrs))

    async def media_list(self, **attrs) -> MediaList:
        attrs.setdefault("name", self._next_name("List"))
        attrs.setdefault("media_type", MediaType.MUSIC.value)
        return await self._save(MediaList(**attrs))

    async def penalty(
        self,
        dynamic_type: Optional[str] = None,
        media_type: str = PenaltyMediaType.CROSS_MEDIA.value,
        **attrs
    ) -> Penalty:
        attrs.setdefault("name", self._next_name("Penalty"))
        return await self._save(Penalty(dynamic_type=dynamic_type, media_type=media_type, **attrs))

    async def apply(self, penalty: Penalty, configuration: RankingConfiguration, value: float) -> PenaltyApplication:
        return await self._save(
            PenaltyApplication(penalty_id=penalty.id, ranking_configuration_id=configuration.id, value=value)
        )

    async def tag(self, media_list: MediaList, penalty: Penalty) -> ListPenalty:
        return await self._save(ListPenalty(list_id=media_list.id, penalty_id=penalty.id))

    async def ranked_list(
        self,
        media_list: MediaList,
        configuration: RankingConfiguration,
        weight: Optional[int] = None
    ) -> RankedList:
        ranked_list = await self._save(
            RankedList(list_id=media_list.id, ranking_configuration_id=configuration.id, weight=weight)
        )
        return await self.reload(ranked_list.id)

    async def penalized(
        self,
        media_list: MediaList,
        configuration: RankingConfiguration,
        value: float,
        dynamic_type: Optional[str] = None
    ) -> PenaltyApplication:
        """Create a penalty, configure it and tag it onto the list."""
        penalty = await self.penalty(dynamic_type=dynamic_type)
        application = await self.apply(penalty, configuration, value)
        await self.tag(media_list, penalty)
        return application

    async def reload(self, ranked_list_id: int) -> RankedList:
        return await RankedListRepository(self.session).get_with_context(ranked_list_id)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with factory() as session:
        yield session


@pytest.fixture
def factory(session):
    return ModelFactory(session)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
