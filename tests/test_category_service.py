import pytest
from sqlalchemy.exc import IntegrityError

from app.repositories import category_repository
from app.schemas.blog.category_schema import CategoryRequest
from app.schemas.blog.post_schema import PostRequest
from app.services.blog import category_service, post_service
from app.services.validation.exception import (
    ConflictException,
    ResourceNotFoundException,
    UnexpectedException,
    ValidationException,
)


@pytest.mark.asyncio
async def test_create_category(db):
    category = await category_service.create_category(db, CategoryRequest(name="Tech", description="d"))

    assert category.id is not None
    assert category.name == "Tech"
    assert category.description == "d"
    assert category.created_at == category.updated_at


@pytest.mark.asyncio
async def test_create_category_duplicate_name(db, tech_category):
    with pytest.raises(ConflictException) as exc:
        await category_service.create_category(db, CategoryRequest(name="Tech"))

    assert exc.value.message == "Category with name 'Tech' already exists"


# Unicidad exacta: otra capitalización es otro nombre
@pytest.mark.asyncio
async def test_create_category_name_is_case_sensitive(db, tech_category):
    category = await category_service.create_category(db, CategoryRequest(name="tech"))
    assert category.id != tech_category.id


@pytest.mark.asyncio
async def test_create_category_blank_name(db):
    with pytest.raises(ValidationException):
        await category_service.create_category(db, CategoryRequest(name="   "))


@pytest.mark.asyncio
async def test_get_category_not_found(db):
    with pytest.raises(ResourceNotFoundException) as exc:
        await category_service.get_category(db, 999)

    assert exc.value.message == "Category not found with id: 999"


@pytest.mark.asyncio
async def test_update_category_keeps_own_name(db, tech_category):
    updated = await category_service.update_category(
        db, tech_category.id, CategoryRequest(name="Tech", description="new")
    )

    assert updated.name == "Tech"
    assert updated.description == "new"
    assert updated.created_at == tech_category.created_at
    assert updated.updated_at >= tech_category.updated_at


@pytest.mark.asyncio
async def test_update_category_name_taken(db, tech_category):
    other = await category_service.create_category(db, CategoryRequest(name="Science"))

    with pytest.raises(ConflictException):
        await category_service.update_category(db, other.id, CategoryRequest(name="Tech"))

    unchanged = await category_service.get_category(db, other.id)
    assert unchanged.name == "Science"


@pytest.mark.asyncio
async def test_update_category_not_found(db):
    with pytest.raises(ResourceNotFoundException):
        await category_service.update_category(db, 42, CategoryRequest(name="X"))


@pytest.mark.asyncio
async def test_delete_category(db, tech_category):
    await category_service.delete_category(db, tech_category.id)

    with pytest.raises(ResourceNotFoundException):
        await category_service.get_category(db, tech_category.id)


@pytest.mark.asyncio
async def test_delete_category_with_posts(db, tech_post):
    with pytest.raises(ConflictException) as exc:
        await category_service.delete_category(db, tech_post.category_id)

    assert exc.value.message == "Cannot delete category with existing posts. Delete all posts first."
    assert (await category_service.get_category(db, tech_post.category_id)).name == "Tech"


@pytest.mark.asyncio
async def test_delete_category_after_posts_removed(db, tech_post):
    await post_service.delete_post(db, tech_post.id)
    await category_service.delete_category(db, tech_post.category_id)

    with pytest.raises(ResourceNotFoundException):
        await category_service.get_category(db, tech_post.category_id)


@pytest.mark.asyncio
async def test_list_categories_sorted_by_name(db):
    for name in ["Science", "Art", "Tech"]:
        await category_service.create_category(db, CategoryRequest(name=name))

    page = await category_service.list_categories(db, page=0, size=2)

    assert [c.name for c in page["items"]] == ["Art", "Science"]
    assert page["total"] == 3
    assert page["total_pages"] == 2
    assert page["has_more"] is True

    last = await category_service.list_categories(db, page=1, size=2)
    assert [c.name for c in last["items"]] == ["Tech"]
    assert last["has_more"] is False


@pytest.mark.asyncio
async def test_list_categories_desc(db):
    for name in ["Science", "Art", "Tech"]:
        await category_service.create_category(db, CategoryRequest(name=name))

    page = await category_service.list_categories(db, sort_by="name", sort_dir="desc")
    assert [c.name for c in page["items"]] == ["Tech", "Science", "Art"]


@pytest.mark.asyncio
async def test_list_categories_invalid_sort_key(db):
    with pytest.raises(ValidationException) as exc:
        await category_service.list_categories(db, sort_by="password")

    assert "sort_by" in exc.value.errors


@pytest.mark.asyncio
async def test_list_categories_invalid_page(db):
    with pytest.raises(ValidationException):
        await category_service.list_categories(db, page=-1)


@pytest.mark.asyncio
async def test_search_categories_case_insensitive(db):
    for name in ["Technology", "Biotech", "Art"]:
        await category_service.create_category(db, CategoryRequest(name=name))

    page = await category_service.search_categories(db, "TECH")

    assert [c.name for c in page["items"]] == ["Biotech", "Technology"]
    assert page["total"] == 2


@pytest.mark.asyncio
async def test_search_categories_escapes_wildcards(db):
    await category_service.create_category(db, CategoryRequest(name="Tech"))
    await category_service.create_category(db, CategoryRequest(name="100% Tech"))

    page = await category_service.search_categories(db, "%")
    assert [c.name for c in page["items"]] == ["100% Tech"]


# El índice único protege el nombre aunque la comprobación previa no vea el duplicado
@pytest.mark.asyncio
async def test_create_category_name_index_conflict(db, tech_category, monkeypatch):
    async def _no_duplicate(*args, **kwargs):
        return False
    monkeypatch.setattr(category_repository, "exists_by_name", _no_duplicate)

    with pytest.raises(ConflictException) as exc:
        await category_service.create_category(db, CategoryRequest(name="Tech"))

    assert exc.value.message == "Category with name 'Tech' already exists"
    assert (await category_service.get_category(db, tech_category.id)).name == "Tech"
    assert await category_repository.count(db) == 1


@pytest.mark.asyncio
async def test_update_category_name_index_conflict(db, tech_category, monkeypatch):
    other = await category_service.create_category(db, CategoryRequest(name="Science"))

    async def _no_duplicate(*args, **kwargs):
        return False
    monkeypatch.setattr(category_repository, "exists_by_name", _no_duplicate)

    with pytest.raises(ConflictException):
        await category_service.update_category(db, other.id, CategoryRequest(name="Tech"))

    assert (await category_service.get_category(db, other.id)).name == "Science"


# Otras violaciones de integridad no se reportan como nombre duplicado
@pytest.mark.asyncio
async def test_create_category_other_integrity_error(db, monkeypatch):
    async def _not_null_violation(*args, **kwargs):
        raise IntegrityError(
            "INSERT INTO categories", {}, Exception("NOT NULL constraint failed: categories.created_at")
        )
    monkeypatch.setattr(category_repository, "save", _not_null_violation)

    with pytest.raises(UnexpectedException):
        await category_service.create_category(db, CategoryRequest(name="Tech"))

    assert await category_repository.count(db) == 0


@pytest.mark.asyncio
async def test_list_categories_sorted_by_description(db):
    await category_service.create_category(db, CategoryRequest(name="A", description="zeta"))
    await category_service.create_category(db, CategoryRequest(name="B", description="alfa"))

    page = await category_service.list_categories(db, sort_by="description")
    assert [c.name for c in page["items"]] == ["B", "A"]
