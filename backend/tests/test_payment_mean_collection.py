"""Tests for PaymentMean and PaymentMeanCollection."""

import pytest

from adyen_checkout.services.payment_means.payment_mean import (
    PaymentMean,
    PaymentMeanCollection,
    PaymentType,
    SourceType,
)
from tests.conftest import UMBRELLA_CODE


def _mean(**raw):
    return PaymentMean.from_raw(raw)


class TestSourceType:
    def test_load_adyen(self):
        assert SourceType.load(1425514) is SourceType.ADYEN
        assert SourceType.load("1425514") is SourceType.ADYEN

    @pytest.mark.parametrize("value", [0, 1, None, "", "abc", 123])
    def test_load_anything_else_is_native(self, value):
        assert SourceType.load(value) is SourceType.SHOPWARE_DEFAULT


class TestPaymentMean:
    def test_from_raw(self):
        pm = _mean(id=3, source=SourceType.ADYEN.value, name="card", hide=True)
        assert pm.id == 3
        assert pm.source is SourceType.ADYEN
        assert pm.is_adyen_source
        assert pm.is_hidden
        assert pm.name == "card"
        assert pm.enriched is False
        assert pm.adyen_type is None

    def test_from_raw_defaults(self):
        pm = _mean()
        assert pm.id == 0
        assert pm.source is SourceType.SHOPWARE_DEFAULT
        assert pm.is_hidden is False
        assert pm.attribute == {}
        assert pm.adyen_code is None
        assert pm.stored_method_id == ""
        assert pm.stored_method_umbrella_id is None

    def test_adyen_type_only_set_when_enriched(self):
        enriched = _mean(id=1, enriched=True, adyenType="scheme")
        not_enriched = _mean(id=2, adyenType="scheme")
        assert enriched.enriched is True
        assert enriched.adyen_type == PaymentType("scheme")
        assert not_enriched.adyen_type is None

    def test_adyen_code_from_attribute(self):
        assert _mean(attribute={"adyen_type": "bcmc_bancontact"}).adyen_code == "bcmc_bancontact"
        assert _mean(attribute={"adyen_type": None}).adyen_code is None

    def test_raw_is_read_only_snapshot(self):
        row = {"id": 1, "name": "invoice"}
        pm = PaymentMean.from_raw(row)
        row["name"] = "changed"
        assert pm.name == "invoice"
        with pytest.raises(TypeError):
            pm.raw["name"] = "other"  # type: ignore[index]

    def test_get_value_fallback(self):
        pm = _mean(id=1, description=None)
        assert pm.get_value("description", "fallback") == "fallback"
        assert pm.get_value("missing") is None

    def test_stored_method_umbrella(self):
        assert _mean(name=UMBRELLA_CODE).is_stored_method_umbrella
        assert not _mean(name="invoice").is_stored_method_umbrella


class TestPaymentMeanCollection:
    @pytest.fixture
    def collection(self):
        return PaymentMeanCollection.from_raw_rows(
            [
                {"id": 1, "name": "invoice", "source": 0},
                {"id": 2, "name": "prepayment", "source": 0, "hide": True},
                {"id": 3, "name": "scheme_card", "source": SourceType.ADYEN.value},
                {
                    "id": 4,
                    "name": UMBRELLA_CODE,
                    "source": SourceType.ADYEN.value,
                    "stored_method_id": "stored-1",
                    "stored_method_umbrella_id": "4_stored-1",
                },
                {"id": 5, "name": UMBRELLA_CODE, "source": 0},
            ]
        )

    def test_iteration_and_count(self, collection):
        assert len(collection) == 5
        assert [pm.id for pm in collection] == [1, 2, 3, 4, 5]

    def test_empty(self):
        collection = PaymentMeanCollection()
        assert len(collection) == 0
        assert list(collection) == []
        assert collection.fetch_stored_method_umbrella_payment_mean() is None

    def test_map_drops_falsy_results(self, collection):
        result = collection.map(lambda pm: pm.id if pm.id % 2 else None)
        assert result == [1, 3, 5]

    def test_filter_returns_new_collection(self, collection):
        filtered = collection.filter(lambda pm: pm.id > 3)
        assert isinstance(filtered, PaymentMeanCollection)
        assert [pm.id for pm in filtered] == [4, 5]
        assert len(collection) == 5

    def test_filter_by_source(self, collection):
        assert [pm.id for pm in collection.filter_by_source(SourceType.ADYEN)] == [3, 4]
        assert [pm.id for pm in collection.filter_by_source(SourceType.SHOPWARE_DEFAULT)] == [
            1,
            2,
            5,
        ]

    def test_filter_exclude_adyen(self, collection):
        assert [pm.id for pm in collection.filter_exclude_adyen()] == [1, 2, 5]

    def test_filter_exclude_hidden(self, collection):
        assert [pm.id for pm in collection.filter_exclude_hidden()] == [1, 3, 4, 5]

    def test_fetch_by_id(self, collection):
        assert collection.fetch_by_id(3).name == "scheme_card"
        assert collection.fetch_by_id(99) is None

    def test_fetch_by_stored_method_id(self, collection):
        assert collection.fetch_by_stored_method_id("stored-1").id == 4
        assert collection.fetch_by_stored_method_id("unknown") is None

    def test_fetch_by_umbrella_stored_method_id(self, collection):
        assert collection.fetch_by_umbrella_stored_method_id("4_stored-1").id == 4
        assert collection.fetch_by_umbrella_stored_method_id("stored-1") is None

    def test_first_umbrella_wins(self, collection):
        assert collection.fetch_stored_method_umbrella_payment_mean().id == 4

    def test_to_raw_mapping(self):
        collection = PaymentMeanCollection.from_raw_rows(
            [{"id": 1, "name": "invoice"}, {"id": 7, "name": "debit"}]
        )
        assert collection.to_raw_mapping() == {
            1: {"id": 1, "name": "invoice"},
            7: {"id": 7, "name": "debit"},
        }

    def test_to_raw_mapping_keys_stored_methods_by_umbrella_id(self):
        collection = PaymentMeanCollection.from_raw_rows(
            [
                {"id": 1, "name": "invoice"},
                {"id": 4, "stored_method_id": "stored-1", "stored_method_umbrella_id": "4_stored-1"},
                {"id": 4, "stored_method_id": "stored-2", "stored_method_umbrella_id": "4_stored-2"},
            ]
        )

        mapping = collection.to_raw_mapping()

        assert list(mapping) == [1, "4_stored-1", "4_stored-2"]
        assert mapping["4_stored-2"]["stored_method_id"] == "stored-2"
