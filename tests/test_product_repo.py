import json

import pytest

from product_inventory.data.seed import SAMPLE_PRODUCTS, seed
from product_inventory.domain.errors import StorageReadError, StorageWriteError
from product_inventory.repos.product_repo import ProductRepo


def test_write_all_pretty_prints_with_two_spaces(repo, products_file):
    repo.write_all([{"id": 1, "name": "Laptop", "price": 60000, "inStock": True}])

    text = products_file.read_text(encoding="utf-8")
    assert text == json.dumps(
        [{"id": 1, "name": "Laptop", "price": 60000, "inStock": True}], indent=2
    )
    assert '\n  {\n    "id": 1,' in text


def test_read_all_missing_file_raises(repo):
    with pytest.raises(StorageReadError) as exc:
        repo.read_all()
    assert str(exc.value) == "Could not read products data"


def test_read_all_invalid_json_raises(repo, products_file):
    products_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageReadError):
        repo.read_all()


def test_read_all_non_array_raises(repo, products_file):
    products_file.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(StorageReadError):
        repo.read_all()


def test_write_all_into_missing_directory_raises(tmp_path):
    repo = ProductRepo(tmp_path / "missing" / "products.json")
    with pytest.raises(StorageWriteError) as exc:
        repo.write_all([])
    assert str(exc.value) == "Could not update products data"


def test_mutate_skips_write_when_fn_fails(repo, products_file):
    repo.write_all([{"id": 1}])

    def boom(products):
        products.append({"id": 2})
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        repo.mutate(boom)
    assert repo.read_all() == [{"id": 1}]


def test_mutate_accepts_returned_list(repo):
    repo.write_all([{"id": 1}, {"id": 2}])
    result = repo.mutate(lambda products: [p for p in products if p["id"] != 1])
    assert result == [{"id": 2}]
    assert repo.read_all() == [{"id": 2}]


def test_seed_creates_file_with_samples(repo, products_file):
    seed(repo)
    assert products_file.exists()
    assert repo.read_all() == SAMPLE_PRODUCTS


def test_seed_keeps_existing_products(repo):
    repo.write_all([{"id": 9, "name": "Desk", "price": 1, "inStock": False}])
    seed(repo)
    assert repo.read_all() == [{"id": 9, "name": "Desk", "price": 1, "inStock": False}]


def test_seed_fills_empty_file(repo, products_file):
    products_file.write_text("[]", encoding="utf-8")
    seed(repo)
    assert [p["name"] for p in repo.read_all()] == ["Laptop", "Mouse"]
