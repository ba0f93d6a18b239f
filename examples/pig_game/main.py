"""Load the pig game's test room into a LocalGraph and print what came out.

Run from the repository root:
    python -m examples.pig_game.main
"""

import json
import logging
from pathlib import Path

from hana_prefab import LocalGraph, PrefabSettings, load, room_from_mapping

from .components import Money, Player, Sprite, Transform
from .prefabs import build_registry

ROOMS = Path(__file__).parent / "rooms"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = PrefabSettings()

    path = ROOMS / "test_room.json"
    document = room_from_mapping(path.stem, json.loads(path.read_text()), settings=settings)

    graph = LocalGraph()
    report = load(document, build_registry(), graph.room(document.name), settings=settings)

    for entity, (transform, sprite) in graph.query(Transform, Sprite):
        print(f"{entity}: {sprite.texture} at {tuple(transform.translation)}")
    for entity, (player,) in graph.query(Player):
        print(f"{entity}: player moving at {player.speed}")
    money = graph.resource(Money)
    print(f"money: {money.amount if money else 0}")

    for failure in report.failures:
        print(f"skipped {failure.instance_name}: {failure.error}")

    graph.unload_room(document.name)
    print(f"unloaded {document.name}, {len(list(graph.all_entities()))} entities left")


if __name__ == "__main__":
    main()
