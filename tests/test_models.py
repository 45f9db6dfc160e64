# tests/test_models.py
"""
Model Tests - Unit Tests for Mosaic Value Objects

This module contains unit tests for the immutable value objects of the
identity layer: identifiers, mosaics, properties and descriptors.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nemid.domain.models (value objects under test)
- nemid.domain.errors (expected validation errors)
- pytest (testing framework)
"""
import dataclasses  # FrozenInstanceError for immutability checks

import pytest  # Testing framework for writing and running tests

from nemid.domain.errors import NilMosaicAmountError, NilMosaicIdError, NilNamespaceIdError
from nemid.domain.models import (
    Mosaic,
    MosaicId,
    MosaicInfo,
    MosaicName,
    MosaicProperties,
    MosaicSupplyType,
    NamespaceId,
)


class TestMosaicId:
    def test_string_is_decimal(self):
        assert str(MosaicId(992621222383397347)) == "992621222383397347"

    def test_to_hex_is_fixed_width_uppercase(self):
        assert MosaicId(5).to_hex() == "0000000000000005"
        assert MosaicId(0x0DC67FBE1CAD29E3).to_hex() == "0DC67FBE1CAD29E3"
        assert MosaicId(2 ** 64 - 1).to_hex() == "FFFFFFFFFFFFFFFF"

    def test_from_hex(self):
        assert MosaicId.from_hex("0DC67FBE1CAD29E3") == MosaicId(0x0DC67FBE1CAD29E3)
        assert MosaicId.from_hex("0x0dc67fbe1cad29e3") == MosaicId(0x0DC67FBE1CAD29E3)

    def test_from_hex_round_trip(self):
        for value in (0, 1, 2 ** 32, 2 ** 63, 2 ** 64 - 1):
            mosaic_id = MosaicId(value)
            assert MosaicId.from_hex(mosaic_id.to_hex()) == mosaic_id

    def test_from_hex_rejects_too_long(self):
        with pytest.raises(ValueError):
            MosaicId.from_hex("1" * 17)

    def test_none_rejected(self):
        with pytest.raises(NilMosaicIdError):
            MosaicId(None)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            MosaicId("123")

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            MosaicId(True)

    @pytest.mark.parametrize("value", [-1, 2 ** 64, 2 ** 70])
    def test_out_of_uint64_range_rejected(self, value):
        with pytest.raises(ValueError):
            MosaicId(value)

    def test_range_bounds_accepted(self):
        assert MosaicId(0).to_hex() == "0000000000000000"
        assert MosaicId(2 ** 64 - 1).to_hex() == "FFFFFFFFFFFFFFFF"

    def test_distinct_ids_have_distinct_hex(self):
        assert MosaicId(0).to_hex() != MosaicId(1).to_hex()
        assert MosaicId.from_hex(MosaicId(2 ** 64 - 1).to_hex()).value == 2 ** 64 - 1

    def test_int_conversion(self):
        assert int(MosaicId(77)) == 77

    def test_equality_and_hash(self):
        assert MosaicId(7) == MosaicId(7)
        assert len({MosaicId(7), MosaicId(7), MosaicId(8)}) == 2

    def test_immutable(self):
        mosaic_id = MosaicId(7)
        with pytest.raises(dataclasses.FrozenInstanceError):
            mosaic_id.value = 8


class TestNamespaceId:
    def test_none_rejected(self):
        with pytest.raises(NilNamespaceIdError):
            NamespaceId(None)

    @pytest.mark.parametrize("value", [-1, 2 ** 64])
    def test_out_of_uint64_range_rejected(self, value):
        with pytest.raises(ValueError):
            NamespaceId(value)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            NamespaceId(False)

    def test_forms(self):
        namespace_id = NamespaceId(255)
        assert str(namespace_id) == "255"
        assert namespace_id.to_hex() == "00000000000000FF"
        assert NamespaceId.from_hex("FF") == namespace_id


class TestMosaic:
    def test_creation(self):
        mosaic = Mosaic(MosaicId(10), 1000000)
        assert mosaic.mosaic_id == MosaicId(10)
        assert mosaic.amount == 1000000

    def test_none_id_rejected(self):
        with pytest.raises(NilMosaicIdError):
            Mosaic(None, 10)

    def test_raw_int_id_rejected(self):
        with pytest.raises(TypeError):
            Mosaic(5, 3)

    def test_none_amount_rejected(self):
        with pytest.raises(NilMosaicAmountError):
            Mosaic(MosaicId(10), None)

    def test_zero_amount_rejected(self):
        with pytest.raises(NilMosaicAmountError):
            Mosaic(MosaicId(10), 0)

    def test_negative_amount_accepted(self):
        assert Mosaic(MosaicId(10), -5).amount == -5

    def test_string(self):
        assert str(Mosaic(MosaicId(10), 25)) == "Mosaic [MosaicId: 10, Amount: 25]"


class TestMosaicProperties:
    def test_fields(self):
        props = MosaicProperties(True, False, True, 6, 1000)
        assert props.supply_mutable is True
        assert props.transferable is False
        assert props.levy_mutable is True
        assert props.divisibility == 6
        assert props.duration == 1000

    def test_string(self):
        props = MosaicProperties(True, False, False, 6, 0)
        assert str(props) == (
            "MosaicProperties [SupplyMutable: True, Transferable: False, "
            "LevyMutable: False, Divisibility: 6, Duration: 0]"
        )


def _info(full_name: str) -> MosaicInfo:
    return MosaicInfo(
        mosaic_id=MosaicId(1),
        full_name=full_name,
        active=True,
        index=0,
        meta_id="5B55E02EB5A4F4000127B4A6",
        namespace="namespace-ref",
        supply=9000000000,
        height=1,
        owner="owner-ref",
        properties=MosaicProperties(False, True, False, 6, 0),
    )


class TestMosaicInfo:
    def test_short_name(self):
        assert _info("nem:xem").short_name == "xem"

    def test_short_name_malformed(self):
        assert _info("badname").short_name == ""
        assert _info("a:b:c").short_name == ""

    def test_short_name_empty_segment(self):
        assert _info("nem:").short_name == ""
        assert _info(":xem").short_name == "xem"

    def test_string_field_order(self):
        text = str(_info("nem:xem"))
        assert text.startswith("MosaicInfo [MosaicId: 1, FullName: nem:xem, Active: True")
        order = ["MosaicId", "FullName", "Active", "Index", "MetaId", "Namespace",
                 "Supply", "Height", "Owner", "Properties"]
        positions = [text.index(f"{name}: ") for name in order]
        assert positions == sorted(positions)
        assert "Owner: owner-ref" in text
        assert "Properties: MosaicProperties [" in text


class TestMosaicName:
    def test_string(self):
        name = MosaicName(MosaicId(3), "xem", NamespaceId(4))
        assert str(name) == "MosaicName [MosaicId: 3, Name: xem, ParentId: 4]"


class TestMosaicSupplyType:
    def test_values(self):
        assert MosaicSupplyType.DECREASE == 0
        assert MosaicSupplyType.INCREASE == 1
        assert len(MosaicSupplyType) == 2

    def test_string_is_ordinal(self):
        assert str(MosaicSupplyType.INCREASE) == "1"
