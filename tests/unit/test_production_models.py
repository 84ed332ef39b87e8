"""
Tests for production, shift and history models.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from models.history import HistoryEntry, HistoryFilterCriteria
from models.production import Pallets, ProductionRecord
from models.shift import Shift, ShiftSchedule
from tests.factories import ProductionRecordFactory, HistoryEntryFactory


class TestProductionRecord:
    """Tests for record validation."""

    def test_from_wire_format(self):
        record = ProductionRecord.model_validate(ProductionRecordFactory.create(
            id=7, same_weight=True, current_pallet=12
        ))

        assert record.id == 7
        assert record.next_shift_same_weight is True
        assert record.next_shift_weight_change is False
        assert record.pallets.current_pallet == 12

    def test_from_snake_case(self):
        record = ProductionRecord(
            id=1,
            product="X",
            weight=100,
            target=200,
            produced=150,
            pallets=Pallets(total=2, completed=1, remaining=1, current_pallet=0),
            next_shift_weight_change=True,
        )
        assert record.next_shift_weight_change is True
        assert record.shifts == ShiftSchedule()

    def test_dump_uses_wire_names(self):
        record = ProductionRecord.model_validate(ProductionRecordFactory.create())
        dumped = record.model_dump(by_alias=True)

        assert list(dumped) == [
            "id", "product", "weight", "target", "produced", "pallets",
            "shifts", "nextShiftSameWeight", "nextShiftWeightChange",
        ]
        assert list(dumped["pallets"]) == ["total", "completed", "remaining", "currentPallet"]

    def test_over_production_kept(self):
        record = ProductionRecord.model_validate(
            ProductionRecordFactory.create(produced=400, target=250)
        )
        assert record.produced == 400

    def test_product_kept_verbatim(self):
        record = ProductionRecord.model_validate(
            ProductionRecordFactory.create(product=" X ")
        )
        assert record.product == " X "

    @pytest.mark.parametrize("overrides", [
        {"product": ""},
        {"weight": 0},
        {"target": 0},
        {"target": -10},
        {"produced": -1},
    ])
    def test_invalid_fields_rejected(self, overrides):
        raw = ProductionRecordFactory.create()
        raw.update(overrides)
        with pytest.raises(PydanticValidationError):
            ProductionRecord.model_validate(raw)

    def test_unbalanced_pallets_rejected(self):
        raw = ProductionRecordFactory.create(total=6, completed=3, remaining=2)
        with pytest.raises(PydanticValidationError, match="must equal total"):
            ProductionRecord.model_validate(raw)

    def test_negative_pallets_rejected(self):
        raw = ProductionRecordFactory.create(current_pallet=-1)
        with pytest.raises(PydanticValidationError):
            ProductionRecord.model_validate(raw)

    def test_unknown_shift_key_rejected(self):
        raw = ProductionRecordFactory.create(shifts={"A": True, "G": True})
        with pytest.raises(PydanticValidationError):
            ProductionRecord.model_validate(raw)

    def test_pallet_mutation_not_revalidated(self):
        record = ProductionRecord.model_validate(ProductionRecordFactory.create())
        record.pallets.remaining = 99
        assert record.pallets.remaining == 99


class TestShiftSchedule:

    def test_missing_shifts_default_false(self):
        schedule = ShiftSchedule.model_validate({"C": True})
        assert schedule.get(Shift.C) is True
        assert schedule.get(Shift.A) is False

    def test_items_in_enum_order(self):
        schedule = ShiftSchedule.model_validate({"E": True, "A": True})
        assert [shift for shift, _ in schedule.items()] == list(Shift)


class TestHistoryEntry:

    def test_frozen(self):
        entry = HistoryEntry.model_validate(HistoryEntryFactory.create())
        with pytest.raises(PydanticValidationError):
            entry.produced = 0

    def test_unknown_shift_rejected(self):
        with pytest.raises(PydanticValidationError):
            HistoryEntry.model_validate(HistoryEntryFactory.create(shift="Z"))

    def test_product_not_trimmed(self):
        entry = HistoryEntry.model_validate(HistoryEntryFactory.create(product=" X "))
        assert entry.product == " X "


class TestHistoryFilterCriteria:

    def test_empty_strings_are_wildcards(self):
        criteria = HistoryFilterCriteria.model_validate(
            {"date": "", "shift": "", "product": "  ", "weight": ""}
        )
        assert criteria.is_empty

    def test_weight_text_converted(self):
        criteria = HistoryFilterCriteria.model_validate({"weight": "180"})
        assert criteria.weight == 180

    def test_product_not_trimmed(self):
        criteria = HistoryFilterCriteria.model_validate({"product": " Chicharrones "})
        assert criteria.product == " Chicharrones "
