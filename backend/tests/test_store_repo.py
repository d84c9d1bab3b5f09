import pytest
from sqlalchemy import func, select

from storefront.db.errors import ForeignKeyViolation, NotFound, UniqueViolation
from storefront.models.product import Product
from storefront.models.store import Store
from storefront.repos.product_repo import SqlAlchemyProductRepo
from storefront.repos.store_repo import SqlAlchemyStoreRepo
from storefront.repos.user_repo import SqlAlchemyUserRepo


def _count(session, model) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


def test_create_store_and_detail(db_session):
    user = SqlAlchemyUserRepo(db_session).create(email="owner@shop.com", name="Owner")
    stores = SqlAlchemyStoreRepo(db_session)

    store = stores.create(name=" Corner Shop ", user_id=user.id)
    assert store.name == "Corner Shop"
    assert store.user_id == user.id
    assert stores.get_by_id(store.id).user_id == user.id

    SqlAlchemyProductRepo(db_session).create(name="Tea", price=3.0, store_id=store.id)
    db_session.expire_all()

    detail = stores.get_detail(store.id)
    assert detail.user.email == "owner@shop.com"
    assert [p.name for p in detail.products] == ["Tea"]
    assert stores.get_detail(store.id + 1000) is None


def test_second_store_for_same_user_violates_unique_index(db_session):
    user = SqlAlchemyUserRepo(db_session).create(email="one@shop.com")
    stores = SqlAlchemyStoreRepo(db_session)
    stores.create(name="S", user_id=user.id)

    with pytest.raises(UniqueViolation):
        stores.create(name="S2", user_id=user.id)
    assert _count(db_session, Store) == 1


def test_store_for_missing_user_violates_foreign_key(db_session):
    stores = SqlAlchemyStoreRepo(db_session)

    with pytest.raises(ForeignKeyViolation):
        stores.create(name="Orphan", user_id=424242)
    assert _count(db_session, Store) == 0


def test_update_store(db_session):
    user = SqlAlchemyUserRepo(db_session).create(email="rename@shop.com")
    stores = SqlAlchemyStoreRepo(db_session)
    store = stores.create(name="Old", user_id=user.id)

    assert stores.update(store.id, name="New").name == "New"
    with pytest.raises(NotFound):
        stores.update(store.id + 1000, name="Nope")


def test_delete_store_cascades_to_products(db_session):
    user = SqlAlchemyUserRepo(db_session).create(email="del@shop.com")
    stores = SqlAlchemyStoreRepo(db_session)
    products = SqlAlchemyProductRepo(db_session)
    store = stores.create(name="Gone", user_id=user.id)
    products.create(name="A", price=1.0, store_id=store.id)
    products.create(name="B", price=2.0, store_id=store.id)

    stores.delete(store.id)
    db_session.expire_all()

    assert _count(db_session, Store) == 0
    assert _count(db_session, Product) == 0
    # The owner is untouched and may open a new store
    assert SqlAlchemyUserRepo(db_session).get_by_id(user.id) is not None
    assert stores.create(name="Again", user_id=user.id).user_id == user.id

    with pytest.raises(NotFound):
        stores.delete(store.id)
