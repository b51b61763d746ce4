"""Unit tests for deltapipe.api.pipeline."""

import asyncio
import random

import pytest

from deltapipe.api.errors import CorruptPatchError, DeltaComputeError, NotAFileError, NotFoundError
from deltapipe.api.pipeline import (
    OptimizationConfig,
    apply_delta,
    apply_delta_async,
    produce_delta,
    produce_delta_async,
    verify_async,
)
from tests.conftest import FailingAlgorithm, LiteralAlgorithm

pytestmark = pytest.mark.pipeline


def _random_bytes(seed: int, size: int) -> bytes:
    rng = random.Random(seed)
    return bytes(rng.getrandbits(8) for _ in range(size))


def _mutate(data: bytes, seed: int) -> bytes:
    rng = random.Random(seed)
    out = bytearray(data)
    for _ in range(20):
        pos = rng.randrange(len(out))
        out[pos] = rng.getrandbits(8)
    out[100:100] = b"inserted block of bytes"
    del out[2000:2100]
    return bytes(out)


BASE = _random_bytes(1, 4096)

ROUND_TRIP_CASES = {
    "text": (b"Hello World! old version.", b"Hello World! new version with extra content."),
    "empty-old": (b"", b"content that did not exist before"),
    "empty-new": (b"content that goes away", b""),
    "both-empty": (b"", b""),
    "identical": (b"unchanged contents\n" * 50, b"unchanged contents\n" * 50),
    "binary": (BASE, _mutate(BASE, 2)),
}


class TestRoundTrip:
    """apply_delta(old, produce_delta(old, new)) == new."""

    @pytest.mark.parametrize(("old_data", "new_data"), ROUND_TRIP_CASES.values(), ids=ROUND_TRIP_CASES.keys())
    @pytest.mark.parametrize("use_fast_temp_dir", [True, False])
    def test_round_trip(self, write_file, tmp_path, stage_probe, old_data, new_data, use_fast_temp_dir):
        old = write_file("old.bin", old_data)
        new = write_file("new.bin", new_data)
        patch = tmp_path / "delta.patch"
        out = tmp_path / "rebuilt.bin"
        config = OptimizationConfig(use_fast_temp_dir=use_fast_temp_dir)

        assert produce_delta(old, new, patch, config, probe=stage_probe) == patch
        assert apply_delta(old, out, patch, config, probe=stage_probe) == out

        assert out.read_bytes() == new_data

    def test_default_config(self, hello_files, tmp_path):
        old, new = hello_files
        produce_delta(old, new, tmp_path / "p.patch")
        apply_delta(old, tmp_path / "out.txt", tmp_path / "p.patch")
        assert (tmp_path / "out.txt").read_bytes() == new.read_bytes()

    @pytest.mark.parametrize("level", [1, 3, 19, 22])
    def test_any_level(self, hello_files, tmp_path, stage_probe, level):
        old, new = hello_files
        config = OptimizationConfig(compression_level=level)
        produce_delta(old, new, tmp_path / "p.patch", config, probe=stage_probe)
        apply_delta(old, tmp_path / "out.txt", tmp_path / "p.patch", config, probe=stage_probe)
        assert (tmp_path / "out.txt").read_bytes() == new.read_bytes()

    def test_injected_algorithm(self, hello_files, tmp_path, stage_probe):
        old, new = hello_files
        algorithm = LiteralAlgorithm()
        produce_delta(old, new, tmp_path / "p.patch", algorithm=algorithm, probe=stage_probe)
        apply_delta(old, tmp_path / "out.txt", tmp_path / "p.patch", algorithm=algorithm, probe=stage_probe)
        assert (tmp_path / "out.txt").read_bytes() == new.read_bytes()


class TestProduceDelta:
    """Test produce_delta()."""

    def test_hello_world_patch_is_small(self, hello_files, tmp_path, stage_probe):
        old, new = hello_files
        patch = produce_delta(old, new, tmp_path / "p.patch", probe=stage_probe)
        assert patch.stat().st_size < old.stat().st_size + new.stat().st_size

    def test_repeated_runs_are_byte_identical(self, write_file, tmp_path, stage_probe):
        old = write_file("old.bin", BASE)
        new = write_file("new.bin", _mutate(BASE, 3))
        config = OptimizationConfig(compression_level=7)

        produce_delta(old, new, tmp_path / "p.patch", config, probe=stage_probe)
        first = (tmp_path / "p.patch").read_bytes()
        produce_delta(old, new, tmp_path / "p.patch", config, probe=stage_probe)

        assert (tmp_path / "p.patch").read_bytes() == first

    def test_overwrites_previous_patch(self, write_file, tmp_path, stage_probe):
        old = write_file("old.bin", b"old")
        new = write_file("new.bin", b"new")
        patch = write_file("p.patch", b"stale patch")
        produce_delta(old, new, patch, probe=stage_probe)
        assert patch.read_bytes() != b"stale patch"

    @pytest.mark.parametrize("missing", ["old", "new"])
    def test_missing_input_writes_nothing(self, tmp_path, stage_dir, stage_probe, missing):
        paths = {"old": tmp_path / "old.bin", "new": tmp_path / "new.bin"}
        for role, path in paths.items():
            if role != missing:
                path.write_bytes(b"present")

        with pytest.raises(NotFoundError):
            produce_delta(paths["old"], paths["new"], tmp_path / "p.patch", probe=stage_probe)

        assert not (tmp_path / "p.patch").exists()
        assert list(stage_dir.iterdir()) == []

    def test_directory_input(self, write_file, tmp_path, stage_probe):
        new = write_file("new.bin", b"data")
        with pytest.raises(NotAFileError):
            produce_delta(tmp_path, new, tmp_path / "p.patch", probe=stage_probe)

    def test_failure_leaves_committed_patch_untouched(self, write_file, tmp_path, stage_dir, stage_probe):
        old = write_file("old.bin", b"old")
        new = write_file("new.bin", b"new")
        patch = write_file("p.patch", b"previously committed")

        with pytest.raises(DeltaComputeError):
            produce_delta(old, new, patch, algorithm=FailingAlgorithm(), probe=stage_probe)

        assert patch.read_bytes() == b"previously committed"
        assert list(stage_dir.iterdir()) == []

    def test_failure_without_fast_temp_leaves_no_staged_file(self, write_file, tmp_path):
        old = write_file("old.bin", b"old")
        new = write_file("new.bin", b"new")
        config = OptimizationConfig(use_fast_temp_dir=False)

        with pytest.raises(DeltaComputeError):
            produce_delta(old, new, tmp_path / "p.patch", config, algorithm=FailingAlgorithm())

        assert sorted(p.name for p in tmp_path.iterdir()) == ["new.bin", "old.bin"]

    def test_patch_staged_outside_final_directory(self, hello_files, tmp_path, stage_dir, stage_probe):
        old, new = hello_files
        produce_delta(old, new, tmp_path / "p.patch", probe=stage_probe)
        assert list(stage_dir.iterdir()) == []
        assert (tmp_path / "p.patch").exists()


class TestApplyDelta:
    """Test apply_delta()."""

    def test_missing_patch(self, write_file, tmp_path, stage_dir, stage_probe):
        old = write_file("old.bin", b"old")
        with pytest.raises(NotFoundError, match="Patch file not found"):
            apply_delta(old, tmp_path / "out.bin", tmp_path / "missing.patch", probe=stage_probe)
        assert not (tmp_path / "out.bin").exists()
        assert list(stage_dir.iterdir()) == []

    def test_missing_old(self, hello_files, tmp_path, stage_probe):
        old, new = hello_files
        produce_delta(old, new, tmp_path / "p.patch", probe=stage_probe)
        with pytest.raises(NotFoundError, match="Old file not found"):
            apply_delta(tmp_path / "gone.txt", tmp_path / "out.txt", tmp_path / "p.patch", probe=stage_probe)
        assert not (tmp_path / "out.txt").exists()

    def test_overwrites_existing_output(self, hello_files, write_file, tmp_path, stage_probe):
        old, new = hello_files
        out = write_file("out.txt", b"something else entirely")
        produce_delta(old, new, tmp_path / "p.patch", probe=stage_probe)
        apply_delta(old, out, tmp_path / "p.patch", probe=stage_probe)
        assert out.read_bytes() == new.read_bytes()

    def test_corrupt_patch_leaves_output_untouched(self, hello_files, write_file, tmp_path, stage_dir, stage_probe):
        old, _ = hello_files
        out = write_file("out.txt", b"committed earlier")
        patch = write_file("bad.patch", b"garbage garbage garbage")

        with pytest.raises(CorruptPatchError):
            apply_delta(old, out, patch, probe=stage_probe)

        assert out.read_bytes() == b"committed earlier"
        assert list(stage_dir.iterdir()) == []


class TestAsync:
    """Test the asyncio wrappers."""

    def test_async_round_trip(self, hello_files, tmp_path):
        old, new = hello_files
        patch = tmp_path / "p.patch"
        out = tmp_path / "out.txt"

        async def run():
            await produce_delta_async(old, new, patch)
            await apply_delta_async(old, out, patch)
            return await verify_async(old, new, patch)

        assert asyncio.run(run()) is True
        assert out.read_bytes() == new.read_bytes()

    def test_async_errors_propagate(self, tmp_path):
        with pytest.raises(NotFoundError):
            asyncio.run(produce_delta_async(tmp_path / "a", tmp_path / "b", tmp_path / "p.patch"))
