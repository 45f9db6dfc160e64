# tests/test_sha3_generator.py
"""
SHA3 Generator Tests - Unit Tests for Default Id Derivation

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nemid.adapters.namespace.sha3 (Sha3IdGenerator under test)
- hashlib (reference digests)
"""
import hashlib  # Reference SHA3-256 digests

from nemid.adapters.namespace.sha3 import Sha3IdGenerator


def _reference_id(name: str, parent_id: int) -> int:
    digest = hashlib.sha3_256(parent_id.to_bytes(8, "little") + name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


class TestGenerateId:
    def test_matches_reference(self):
        assert Sha3IdGenerator.generate_id("nem", 0) == _reference_id("nem", 0)
        assert Sha3IdGenerator.generate_id("xem", 12345) == _reference_id("xem", 12345)

    def test_fits_in_64_bits(self):
        for name in ("a", "nem", "xem", "prx", ""):
            assert 0 <= Sha3IdGenerator.generate_id(name, 0) < 2 ** 64

    def test_parent_changes_id(self):
        assert Sha3IdGenerator.generate_id("xem", 1) != Sha3IdGenerator.generate_id("xem", 2)


class TestNamespacePath:
    def test_root_namespace(self):
        generator = Sha3IdGenerator()
        assert generator.generate_namespace_path("nem") == [_reference_id("nem", 0)]

    def test_nested_namespace_chains_parents(self):
        generator = Sha3IdGenerator()
        path = generator.generate_namespace_path("a.b.c")
        assert len(path) == 3
        assert path[0] == _reference_id("a", 0)
        assert path[1] == _reference_id("b", path[0])
        assert path[2] == _reference_id("c", path[1])
        assert generator.generate_namespace_id("a.b.c") == path[2]

    def test_sub_namespace_differs_from_root(self):
        generator = Sha3IdGenerator()
        assert generator.generate_namespace_id("nem") != generator.generate_namespace_id("nem.sub")


class TestGenerateMosaicId:
    def test_derived_under_namespace(self):
        generator = Sha3IdGenerator()
        expected = _reference_id("xem", _reference_id("nem", 0))
        assert generator.generate_mosaic_id("nem", "xem") == expected

    def test_deterministic(self):
        assert Sha3IdGenerator().generate_mosaic_id("nem", "xem") == Sha3IdGenerator().generate_mosaic_id("nem", "xem")

    def test_distinct_names(self):
        generator = Sha3IdGenerator()
        assert generator.generate_mosaic_id("nem", "xem") != generator.generate_mosaic_id("nem", "abc")

    def test_total_for_any_strings(self):
        generator = Sha3IdGenerator()
        assert isinstance(generator.generate_mosaic_id("", ""), int)
        assert isinstance(generator.generate_mosaic_id("Ünïcode..x", "Ⓜ"), int)
