"""Entry point: print the hero marketplace for the saved session."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

from cpudefense.engine.logger import init_logger
from cpudefense.engine.settings import load_settings, save_path
from cpudefense.heroes.kinds import SERIES_NORMAL, StageIdentifier
from cpudefense.heroes.persistence import load_session


SETTINGS_PATH = Path("settings.json")


def parse_stage(args: List[str]) -> StageIdentifier:
    if not args:
        return StageIdentifier(SERIES_NORMAL, 1)
    series, _, number = args[0].partition("-")
    return StageIdentifier(int(series), int(number or 1))


def main(argv: List[str]) -> None:
    settings = load_settings(SETTINGS_PATH)
    logger = init_logger(SETTINGS_PATH)
    registry, purse = load_session(save_path(settings), logger=logger)

    stage = parse_stage(argv)
    registry.enter_stage(stage)

    print(
        f"Stage {stage}  coins available: {purse.available_coins()}  "
        f"spent on heroes: {registry.coins_spent()}"
    )
    for card in registry.cards(stage):
        if card.on_leave:
            status = "on leave"
        elif not card.available:
            status = "locked"
        elif card.maxed:
            status = "max"
        else:
            status = f"cost {card.cost}"
        print(
            f"{card.full_name:<28} {card.level}/{card.max_level:<3} "
            f"{card.description.strength_desc:<18} {card.description.upgrade_desc:<18} {status}"
        )


if __name__ == "__main__":
    main(sys.argv[1:])
