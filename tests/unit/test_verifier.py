"""Unit tests for ROM verification."""

from oos.core.patches import MISMATCH_BYTES, MISMATCH_ITEM_ID, MISMATCH_SUB_ID, Addr
from oos.core.registry import PatchRegistry
from oos.core.verifier import Diagnostic, Verifier, verify
from oos.data import SEASONS


class TestVerifier:
    """Tests for Verifier.verify()."""

    def test_vanilla_image_is_clean(self, vanilla_image):
        assert verify(vanilla_image) == []

    def test_zero_image_reports_sorted(self, zero_image):
        diagnostics = verify(zero_image)
        names = [d.name for d in diagnostics]
        assert names
        assert names == sorted(names)

    def test_exceptions_are_skipped(self, zero_image):
        names = {d.name for d in verify(zero_image)}
        assert not names & SEASONS.verify_exceptions

    def test_corrupted_fixed_patch(self, vanilla_image):
        offset = Addr(0x04, 0x61A3).full_offset()
        vanilla_image[offset] = 0x66
        diagnostics = verify(vanilla_image)
        assert len(diagnostics) == 1
        assert diagnostics[0].name == "maku gate check"
        assert diagnostics[0].mismatch.kind == MISMATCH_BYTES
        assert diagnostics[0].mismatch.offset == offset
        assert diagnostics[0].mismatch.found == b"\x66"

    def test_corrupted_slot(self, vanilla_image):
        offset = Addr(0x15, 0x5424).full_offset()
        vanilla_image[offset] = 0x00
        diagnostics = verify(vanilla_image)
        assert [d.name for d in diagnostics] == ["d2 bracelet chest"]
        assert diagnostics[0].mismatch.kind == MISMATCH_ITEM_ID

    def test_record_sharing_chest_bytes(self, vanilla_image):
        """The compass record starts on the d2 chest's sub id byte."""
        offset = Addr(0x15, 0x5425).full_offset()
        assert PatchRegistry.build().treasures["compass"].addr.full_offset() == offset
        vanilla_image[offset] = 0x01
        diagnostics = verify(vanilla_image)
        assert [d.name for d in diagnostics] == ["d2 bracelet chest"]
        assert diagnostics[0].mismatch.kind == MISMATCH_SUB_ID

    def test_corrupted_excepted_patch_is_ignored(self, vanilla_image):
        vanilla_image[Addr(0x15, 0x7511).full_offset()] = 0x00  # rod gift
        assert verify(vanilla_image) == []

    def test_custom_exceptions(self, vanilla_image):
        vanilla_image[Addr(0x04, 0x61A3).full_offset()] = 0x66
        registry = PatchRegistry.build()
        verifier = Verifier(SEASONS.verify_exceptions | {"maku gate check"})
        assert verifier.verify(registry, vanilla_image) == []

    def test_check_has_no_side_effects(self, vanilla_image):
        before = bytes(vanilla_image)
        registry = PatchRegistry.build()
        Verifier().verify(registry, vanilla_image)
        assert bytes(vanilla_image) == before
        assert registry.treasures["flippers"].mode == 0x02


class TestUnknownExceptions:
    def test_default_list_matches_tables(self, registry):
        assert Verifier().unknown_exceptions(registry) == []

    def test_reports_stale_names(self, registry):
        verifier = Verifier({"rod gift", "old slot", "another old slot"})
        assert verifier.unknown_exceptions(registry) == ["another old slot", "old slot"]


class TestDiagnostic:
    def test_str(self, vanilla_image):
        vanilla_image[Addr(0x04, 0x61A3).full_offset()] = 0x66
        (diagnostic,) = verify(vanilla_image)
        assert isinstance(diagnostic, Diagnostic)
        assert str(diagnostic) == "maku gate check: expected 7e at 121a3; found 66"
