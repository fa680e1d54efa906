from app.data.seed import SAMPLE_PRODUCTS, seed
from app.domain.schemas import Product
from app.repos.product_repo import ProductRepo


def test_get_by_id_returns_every_seeded_product(repo):
    for product in SAMPLE_PRODUCTS:
        assert repo.get_by_id(product.id) == product


def test_get_all_contains_exactly_seeded_set(repo):
    products = repo.get_all()
    assert len(products) == 2
    assert {(p.id, p.name, p.price) for p in products} == {
        (1, "Laptop", 999.99),
        (2, "Phone", 699.99),
    }


def test_get_by_id_unknown_returns_none(repo):
    for product_id in (0, 3, 99, -1):
        assert repo.get_by_id(product_id) is None


def test_get_all_returns_fresh_list(repo):
    first = repo.get_all()
    first.clear()
    assert len(repo.get_all()) == 2
    assert repo.get_all() is not repo.get_all()


def test_reads_are_idempotent(repo):
    assert repo.get_all() == repo.get_all()
    assert repo.get_by_id(1) == repo.get_by_id(1)


def test_unseeded_repo_is_empty():
    assert ProductRepo().get_all() == []


def test_instances_are_independent():
    a = seed(ProductRepo())
    b = ProductRepo()
    assert a.get_by_id(1) is not None
    assert b.get_by_id(1) is None


def test_seed_overwrites_by_key():
    repo = seed(ProductRepo())
    repo.seed([Product(id=1, name="Tablet", description="Small tablet", price=299.0)])
    assert len(repo.get_all()) == 2
    assert repo.get_by_id(1).name == "Tablet"


def test_seed_keeps_insertion_order(repo):
    assert [p.id for p in repo.get_all()] == [1, 2]
