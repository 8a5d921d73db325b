"""Quick-entry registry."""
import pytest

from inventory_catalog.exceptions import PermissionDenied, ValidationFailed
from inventory_catalog.models.slot import SLOT_QUICK_ENTRY
from inventory_catalog.schemas.quick_entry import QuickEntryCategory
from inventory_catalog.services.quick_entry import QuickEntryRegistry

MODELS = QuickEntryCategory.MODELS
PRICES = QuickEntryCategory.PRICES
BARCODES = QuickEntryCategory.BARCODES


@pytest.fixture
def registry(workspace):
    return QuickEntryRegistry(workspace)


def test_add_keeps_strings_sorted(registry, admin):
    registry.add(admin, BARCODES, "b")
    assert registry.add(admin, BARCODES, "a") == ["a", "b"]


def test_add_trims(registry, admin):
    assert registry.add(admin, BARCODES, "  42-X  ") == ["42-X"]


def test_duplicate_is_rejected_and_not_stored_twice(registry, admin):
    registry.add(admin, BARCODES, "dup")
    with pytest.raises(ValidationFailed):
        registry.add(admin, BARCODES, " dup ")
    assert registry.values(BARCODES) == ["dup"]


def test_matching_is_case_sensitive(registry, admin):
    registry.add(admin, BARCODES, "abc")
    assert registry.add(admin, BARCODES, "ABC") == ["ABC", "abc"]


def test_blank_value_rejected(registry, admin):
    with pytest.raises(ValidationFailed):
        registry.add(admin, MODELS, "   ")


def test_prices_sorted_numerically(registry, admin):
    registry.workspace.quick_entry.prices = []
    registry.add(admin, PRICES, "100")
    registry.add(admin, PRICES, 20)
    assert registry.add(admin, PRICES, "50") == [20, 50, 100]


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "nan"])
def test_invalid_prices_rejected(registry, admin, raw):
    before = registry.values(PRICES)
    with pytest.raises(ValidationFailed):
        registry.add(admin, PRICES, raw)
    assert registry.values(PRICES) == before


def test_duplicate_price_rejected(registry, admin):
    with pytest.raises(ValidationFailed):
        registry.add(admin, PRICES, "50")


def test_add_persists(registry, admin, store):
    registry.add(admin, MODELS, "SAM-00")
    assert store.load(SLOT_QUICK_ENTRY)["models"] == ["SAM-00", "SAM-01", "SAM-02"]


def test_rename_resorts(registry, admin):
    assert registry.rename(admin, MODELS, "SAM-01", "SAM-99") == ["SAM-02", "SAM-99"]


def test_rename_to_same_value_allowed(registry, admin):
    assert registry.rename(admin, MODELS, "SAM-01", "SAM-01") == ["SAM-01", "SAM-02"]


def test_rename_to_existing_value_rejected(registry, admin):
    with pytest.raises(ValidationFailed):
        registry.rename(admin, MODELS, "SAM-01", "SAM-02")
    assert registry.values(MODELS) == ["SAM-01", "SAM-02"]


def test_rename_price(registry, admin):
    assert registry.rename(admin, PRICES, "200", "10") == [10, 50, 75, 100, 120, 150]


def test_delete_removes_value(registry, admin):
    assert registry.delete(admin, MODELS, "SAM-01") == ["SAM-02"]
    assert registry.delete(admin, PRICES, "75") == [50, 100, 120, 150, 200]


def test_delete_absent_value_is_noop(registry, admin):
    assert registry.delete(admin, MODELS, "nope") == ["SAM-01", "SAM-02"]


def test_permissions(registry, viewer, guest):
    with pytest.raises(PermissionDenied):
        registry.add(viewer, MODELS, "x")
    with pytest.raises(PermissionDenied):
        registry.rename(viewer, MODELS, "SAM-01", "x")
    with pytest.raises(PermissionDenied):
        registry.delete(viewer, MODELS, "SAM-01")
    with pytest.raises(PermissionDenied):
        registry.add(guest, MODELS, "x")


def test_guest_reads_published_lists(registry, admin, guest):
    registry.add(admin, MODELS, "SAM-03")
    assert registry.data(guest).models == ["SAM-01", "SAM-02"]
    assert registry.data(admin).models == ["SAM-01", "SAM-02", "SAM-03"]
