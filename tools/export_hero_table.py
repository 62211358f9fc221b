"""Dump the static hero rule table to JSON for balancing spreadsheets."""
import json
from dataclasses import asdict, is_dataclass
from pathlib import Path

from cpudefense.heroes.economy import get_price
from cpudefense.heroes.specs import HERO_SPECS, HeroLevelGate, StageNumberGate
from cpudefense.heroes.strength import strength

ROOT = Path(__file__).resolve().parents[1]
OUTPUT = ROOT / "hero_table.json"


def prerequisite_entry(gate) -> dict | None:
    if isinstance(gate, HeroLevelGate):
        return {"kind": gate.kind.name, "minimumLevel": gate.minimum_level}
    if isinstance(gate, StageNumberGate):
        return {"minimumStage": gate.minimum_stage}
    return None


def table() -> list[dict]:
    rows = []
    for kind, spec in HERO_SPECS.items():
        curve = asdict(spec.curve) if is_dataclass(spec.curve) else {}
        rows.append(
            {
                "kind": kind.name,
                "name": spec.full_name,
                "family": spec.family.value,
                "curve": {"type": type(spec.curve).__name__, **curve},
                "baseCap": spec.base_cap,
                "receivesCapBonus": spec.receives_cap_bonus,
                "prerequisite": prerequisite_entry(spec.prerequisite),
                "strengths": [round(strength(kind, level), 4) for level in range(spec.base_cap + 4)],
                "prices": [get_price(level) for level in range(spec.base_cap + 3)],
            }
        )
    return rows


if __name__ == "__main__":
    OUTPUT.write_text(json.dumps(table(), indent=2))
    print(f"Wrote {OUTPUT}")
