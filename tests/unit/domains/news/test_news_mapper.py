from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.exceptions import DataIntegrityError, NotFoundError
from newsdesk.core.unit_of_work import UnitOfWork
from newsdesk.domains.news.services import NewsMapper
from newsdesk.models import Tag
from newsdesk.models.news import NewsSchema
from tests.utils.builders import (
    all_news,
    all_tags,
    create_author,
    create_news,
    create_rubric,
    create_tag,
)


def _transfer(**overrides) -> NewsSchema:
    data = {
        "title": "Quantum chip unveiled",
        "body": "Details about the chip.",
        "tags": ["quantum", "hardware"],
        "date": datetime(2024, 5, 1, 12, 0),
        "author_name": "Jane Doe",
        "rubric_name": "Technology",
    }
    data.update(overrides)
    return NewsSchema(**data)


@pytest.mark.asyncio
async def test_to_transfer_flattens_aggregate(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session, name="Jane Doe")
    rubric = await create_rubric(async_session, name="Technology")
    tag = await create_tag(async_session, name="quantum")
    news = await create_news(
        async_session,
        author_id=author.id,
        rubric_id=rubric.id,
        title="Quantum chip unveiled",
        tags=[tag],
    )

    dto = await NewsMapper(uow).to_transfer(news)

    assert dto.id == news.id
    assert dto.title == "Quantum chip unveiled"
    assert dto.author_name == "Jane Doe"
    assert dto.rubric_name == "Technology"
    assert dto.tags == ["quantum"]
    assert dto.date == news.date


@pytest.mark.asyncio
async def test_to_transfer_without_tags_gives_empty_list(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session)
    rubric = await create_rubric(async_session)
    news = await create_news(async_session, author_id=author.id, rubric_id=rubric.id)

    dto = await NewsMapper(uow).to_transfer(news)

    assert dto.tags == []


@pytest.mark.asyncio
async def test_to_transfer_with_dangling_author_is_integrity_fault(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    rubric = await create_rubric(async_session)
    news = await create_news(async_session, author_id=999, rubric_id=rubric.id)

    with pytest.raises(DataIntegrityError) as exc_info:
        await NewsMapper(uow).to_transfer(news)

    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.entity == "Author"


@pytest.mark.asyncio
async def test_round_trip_preserves_content(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session, name="Jane Doe")
    rubric = await create_rubric(async_session, name="Technology")
    tags = [
        await create_tag(async_session, name="quantum"),
        await create_tag(async_session, name="hardware"),
    ]
    news = await create_news(
        async_session,
        author_id=author.id,
        rubric_id=rubric.id,
        title="Quantum chip unveiled",
        body="Details about the chip.",
        tags=tags,
    )
    mapper = NewsMapper(uow)

    restored = await mapper.from_transfer(await mapper.to_transfer(news))

    assert restored.title == news.title
    assert restored.body == news.body
    assert restored.author_id == author.id
    assert restored.rubric_id == rubric.id
    assert set(mapper.tag_names_of(restored.tags)) == {"quantum", "hardware"}
    assert {tag.id for tag in restored.tags} == {tag.id for tag in tags}
    assert len(await all_tags(async_session)) == 2


@pytest.mark.asyncio
async def test_from_transfer_creates_missing_tags(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session, name="Jane Doe")
    rubric = await create_rubric(async_session, name="Technology")
    await create_tag(async_session, name="quantum")

    news = await NewsMapper(uow).from_transfer(_transfer())

    assert news.id is None
    assert news.author_id == author.id
    assert news.rubric_id == rubric.id
    assert [tag.name for tag in news.tags] == ["quantum", "hardware"]
    assert all(tag.id is not None for tag in news.tags)


@pytest.mark.asyncio
async def test_from_transfer_normalizes_aware_dates_to_utc(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    await create_author(async_session, name="Jane Doe")
    await create_rubric(async_session, name="Technology")
    aware = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    news = await NewsMapper(uow).from_transfer(_transfer(date=aware, tags=[]))

    assert news.date == datetime(2024, 5, 1, 12, 0)
    assert news.date.tzinfo is None


@pytest.mark.asyncio
async def test_from_transfer_with_unknown_author_writes_nothing(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    await create_rubric(async_session, name="Technology")

    with pytest.raises(NotFoundError) as exc_info:
        await NewsMapper(uow).from_transfer(_transfer(author_name="Nobody"))
    await uow.rollback()

    assert exc_info.value.entity == "Author"
    assert await all_tags(async_session) == []
    assert await all_news(async_session) == []


@pytest.mark.asyncio
async def test_from_transfer_with_unknown_rubric_fails(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    await create_author(async_session, name="Jane Doe")

    with pytest.raises(NotFoundError) as exc_info:
        await NewsMapper(uow).from_transfer(_transfer(rubric_name="Gardening"))

    assert exc_info.value.entity == "Rubric"
    assert await all_tags(async_session) == []


@pytest.mark.asyncio
async def test_to_transfer_many_keeps_order(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session)
    rubric = await create_rubric(async_session)
    items = [
        await create_news(async_session, author_id=author.id, rubric_id=rubric.id, title=title)
        for title in ("first", "second", "third")
    ]

    dtos = await NewsMapper(uow).to_transfer_many(list(reversed(items)))

    assert [dto.title for dto in dtos] == ["third", "second", "first"]


@pytest.mark.asyncio
async def test_to_transfer_many_fails_on_the_broken_item(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session)
    rubric = await create_rubric(async_session)
    first = await create_news(async_session, author_id=author.id, rubric_id=rubric.id, title="first")
    broken = await create_news(async_session, author_id=author.id, rubric_id=404, title="second")
    third = await create_news(async_session, author_id=author.id, rubric_id=rubric.id, title="third")

    with pytest.raises(DataIntegrityError) as exc_info:
        await NewsMapper(uow).to_transfer_many([first, broken, third])

    assert exc_info.value.entity == "Rubric"
    assert f"News {broken.id}" in exc_info.value.message


@pytest.mark.asyncio
async def test_link_tags_skips_duplicate_tag_ids(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    author = await create_author(async_session)
    rubric = await create_rubric(async_session)
    tag = await create_tag(async_session, name="dup")
    news = await create_news(async_session, author_id=author.id, rubric_id=rubric.id)
    news.tags = [tag, tag]

    links = await NewsMapper(uow).link_tags(news)
    await uow.commit()

    assert len(links) == 1
    assert [link.tag_id for link in await uow.news_tags.get_by_news_id(news.id)] == [tag.id]


def test_tag_names_of_preserves_order() -> None:
    tags = [Tag(name="b"), Tag(name="a"), Tag(name="c")]

    assert NewsMapper.tag_names_of(tags) == ["b", "a", "c"]
    assert NewsMapper.tag_names_of([]) == []


@pytest.mark.asyncio
async def test_from_transfer_many_keeps_input_order(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    await create_author(async_session, name="Jane Doe")
    await create_rubric(async_session, name="Technology")

    items = await NewsMapper(uow).from_transfer_many(
        [
            _transfer(title="first", tags=["x"]),
            _transfer(title="second", tags=[]),
            _transfer(title="third", tags=["x", "y"]),
        ]
    )

    assert [news.title for news in items] == ["first", "second", "third"]
    assert items[0].tags[0] is items[2].tags[0]
    assert [tag.name for tag in await all_tags(async_session)] == ["x", "y"]


@pytest.mark.asyncio
async def test_from_transfer_many_aborts_on_unknown_author(
    async_session: AsyncSession,
    uow: UnitOfWork,
) -> None:
    await create_author(async_session, name="Jane Doe")
    await create_rubric(async_session, name="Technology")

    with pytest.raises(NotFoundError) as exc_info:
        await NewsMapper(uow).from_transfer_many(
            [
                _transfer(title="first", tags=["kept-until-rollback"]),
                _transfer(title="second", author_name="Nobody", tags=["never"]),
                _transfer(title="third"),
            ]
        )
    await uow.rollback()

    assert exc_info.value.entity == "Author"
    assert exc_info.value.key == "Nobody"
    assert await all_tags(async_session) == []
    assert await all_news(async_session) == []
