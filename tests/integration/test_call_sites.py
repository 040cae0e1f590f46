"""
Integration test: Validating real call sites.

Tests:
- A keyword-argument method validated by ParmList
- A YAML-declared contract applied to many calls
- Validation results staying separate across threads
"""

import tempfile
import threading
from pathlib import Path

import pytest

from parmlist import (
    ParmList,
    ParmSpec,
    UsageFault,
    ValidationError,
    last_error,
    load_specs,
    simple_parms,
    validate_parms,
)


class Table:
    """Small consumer of the library, written the way callers use it."""

    def draw(self, **kwargs):
        parms = ParmList(
            kwargs,
            legal=["textcolor", "border", "cellpadding"],
            required=["bgcolor"],
            defaults={"bgcolor": "#ffffff", "textcolor": "#000000"},
        )
        bgcolor, textcolor, border = parms.get("bgcolor", "textcolor", "border")
        return f"{bgcolor}/{textcolor}/{border}"

    def save(self, *args):
        filename, data = simple_parms(["-file", "-data"], list(args))
        return filename, data


class TestKeywordMethod:
    """ParmList over **kwargs."""

    def test_defaults_fill_in(self):
        assert Table().draw(BGColor="#ff0000") == "#ff0000/#000000/None"

    def test_everything_given(self):
        assert Table().draw(bgcolor="#1", textcolor="#2", border=3) == "#1/#2/3"

    def test_typo_rejected(self):
        with pytest.raises(ValidationError, match="'boarder' not legal"):
            Table().draw(boarder=1)

    def test_simple_parms_positional(self):
        assert Table().save("-file", "a.txt", "-data", None) == ("a.txt", None)

    def test_simple_parms_extra_rejected(self):
        with pytest.raises(UsageFault):
            Table().save("-file", "a.txt", "-data", "x", "-mode", "w")


class TestDeclaredContracts:
    """Contracts loaded from YAML and reused."""

    def test_contracts_from_file(self):
        text = (
            "draw_table:\n"
            "  legal: [\"-border\"]\n"
            "  required: [\"-rows\"]\n"
            "  defaults:\n"
            "    \"-border\": 1\n"
        )
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "contracts.yaml"
            path.write_text(text)
            specs = load_specs(path)

        contract = specs["draw_table"]
        assert contract.parse({"-Rows": [[1, 2]]}).get("-rows", "-border") == ([[1, 2]], 1)

        result = contract.validate({"-border": 2, "-width": 9})
        assert not result.ok
        assert result.messages == (
            "Required parameter '-rows' missing",
            "Parameter '-width' not legal here",
        )

    def test_roundtrip_through_all_values(self):
        contract = ParmSpec(legal=["-a", "-b"], defaults={"-a": 1})
        first = contract.parse({"-B": {"nested": True}})
        second = ParmList.new({
            "-parms": first.all_values(),
            "-legal": first.list_names(),
        })
        assert second.all_values() == first.all_values()
        assert second.get("-b") is first.get("-b")


class TestContextIsolation:
    """Failures in one thread are not visible in another."""

    def test_last_error_per_thread(self):
        seen = {}
        barrier = threading.Barrier(2)

        def fail():
            result = validate_parms({"-parms": {}, "-required": ["-missing"]})
            barrier.wait()
            seen["fail"] = (result.ok, last_error())

        def succeed():
            result = validate_parms({"-parms": {"-ok": 1}})
            barrier.wait()
            seen["succeed"] = (result.ok, last_error())

        threads = [threading.Thread(target=fail), threading.Thread(target=succeed)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen["fail"] == (False, "Required parameter '-missing' missing")
        assert seen["succeed"] == (True, "")
