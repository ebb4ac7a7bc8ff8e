"""Unit tests for the in-memory article store."""

import pytest

from feedboard.domain.entities import ArticleDraft
from feedboard.domain.exceptions import StoreNotReadyError
from feedboard.infrastructure.memory import InMemoryArticleRepository


@pytest.fixture
def repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.mark.asyncio
async def test_operations_fail_before_initialize(repository: InMemoryArticleRepository):
    with pytest.raises(StoreNotReadyError):
        await repository.get_all()
    with pytest.raises(StoreNotReadyError):
        await repository.create(ArticleDraft(title="Hi"))


@pytest.mark.asyncio
async def test_initialize_seeds_once(repository: InMemoryArticleRepository):
    await repository.initialize()
    await repository.initialize()
    titles = {a.title for a in await repository.get_all()}
    assert titles == {"Atardecer en la ciudad", "Cocina express", "Rutina matutina"}


@pytest.mark.asyncio
async def test_initialize_without_seed(repository: InMemoryArticleRepository):
    await repository.initialize(seed=False)
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_create_assigns_identity_and_resets_likes(repository: InMemoryArticleRepository):
    await repository.initialize(seed=False)
    created = [
        await repository.create(ArticleDraft(title=f"Article {i}", views=i))
        for i in range(20)
    ]

    assert all(a.likes == 0 for a in created)
    assert all(a.id for a in created)
    assert len({a.id for a in created}) == len(created)
    for earlier, later in zip(created, created[1:]):
        assert later.created_at > earlier.created_at


@pytest.mark.asyncio
@pytest.mark.parametrize(("views", "expected"), [(-5, 0), ("12.9", 12), ("abc", 0)])
async def test_create_normalizes_views(repository: InMemoryArticleRepository, views, expected):
    await repository.initialize(seed=False)
    article = await repository.create(ArticleDraft(title="Hi", views=views))
    assert article.views == expected


@pytest.mark.asyncio
async def test_create_does_not_validate_title(repository: InMemoryArticleRepository):
    await repository.initialize(seed=False)
    article = await repository.create(ArticleDraft(title=""))
    assert article.title == ""


@pytest.mark.asyncio
async def test_returned_records_are_copies(repository: InMemoryArticleRepository):
    await repository.initialize(seed=False)
    created = await repository.create(ArticleDraft(title="Original"))
    created.title = "Mutated"
    created.likes = 99

    listed = await repository.get_all()
    listed[0].views = 1000

    stored = (await repository.get_all())[0]
    assert stored.title == "Original"
    assert stored.likes == 0
    assert stored.views == 0


@pytest.mark.asyncio
async def test_listing_is_idempotent(repository: InMemoryArticleRepository):
    await repository.initialize()
    assert await repository.get_all() == await repository.get_all()


@pytest.mark.asyncio
async def test_clear_empties_collection(repository: InMemoryArticleRepository):
    await repository.initialize()
    await repository.clear()
    assert await repository.count() == 0
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_separate_instances_are_isolated():
    first = InMemoryArticleRepository()
    second = InMemoryArticleRepository()
    await first.initialize(seed=False)
    await second.initialize(seed=False)

    await first.create(ArticleDraft(title="Only here"))

    assert await first.count() == 1
    assert await second.count() == 0
