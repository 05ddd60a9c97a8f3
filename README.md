# ammobot

`ammobot` holds the building blocks for playing characters in a web-based MMO
through the game's HTTP API: a client for the API, indexes over the game's
static data, and a character object that keeps a queue of actions and sends
them to the server as its cooldowns allow.

## Talking to the server

`ammobot.client.Client(base_url, token="", *, session=None, verify=True, timeout=30.0)`
wraps the API. It sends JSON with a bearer token; `load_token(path)` reads the
token from the first line of a file and returns an empty string when the file
is missing.

- Catalogue lookups page through the server 100 entries at a time:
  `get_items()` and `get_monsters()` return dicts keyed by code;
  `get_maps()`, `get_resource_spots()`, `get_bank_items()` and
  `get_npc_items()` return lists. `get_characters()` returns the account's
  character names, `get_bank_detail()` the bank summary,
  `get_character(name)` one character's state, and
  `get_map_with_content_code(code)` the `MapCoord` of the first tile holding
  that content.
- Actions (`move`, `fight`, `rest`, `craft`, `use_item`, `recycle`,
  `task_new`, `task_trade`, `task_complete`, `unequip_item`, `equip_item`,
  `gather`, `deposit_item`, `withdraw_item`, `deposit_gold`,
  `withdraw_gold`, `buy_item`) return a `(cooldown_seconds, state)` pair.
  For `fight` the state is a list of character states.

Any failed request, non-200 answer or unreadable body raises
`ammobot.client.ApiError`, which carries `path` and `status`.

## Game data

Each manager is filled from the client with `initialize(...)` or from plain
JSON-like data with `load(...)`, which makes them easy to use offline:

- `MapManager(client)`: `monster_coord(code)` and `spot_coord(code)` give the
  first tile holding a monster or resource spot, or `None`.
- `MonsterManager(map_manager)`: hit points, elemental attack and resistance,
  loot (`Loot` values) and location; `monster_list()` orders monsters from
  highest level to lowest.
- `ItemManager()`: recipes (`Recipe`), gathering requirements
  (`GatheringRequirement`), effects, levels, item types, and
  `loot_monster_name(code)`, the highest-level monster dropping an item.
- `ResourceManager()`: `resource_coord(character, code)` is the spot
  dropping a resource that is nearest to the character.
- `NPCManager(locations=None)`: buy and sell prices as `NPCItemTrade` values
  in `TradeCurrency.GOLD` or `TradeCurrency.TASK_COIN`; `coords(npc)` only
  knows the locations passed to the constructor.

```python
from ammobot.map_manager import MapManager
from ammobot.types import MapCoord

maps = MapManager(client=None)
maps.load([{"x": 2, "y": 0, "interactions": {"content": {"type": "resource", "code": "copper_rocks"}}}])
assert maps.spot_coord("copper_rocks") == MapCoord(2, 0)
```

## Characters

`ammobot.sheet.CharacterSheet` answers questions about a character's cached
state: hit points, elemental attack, damage and resistance, inventory counts
and free space, equipped items, gold, skill levels (`"combat"` is the
character level) and the current task. `fight_items(item_manager, level)`
collects the weapons and armour in the inventory usable at a level into an
`ammobot.orders.FightItems`.

`ammobot.character.Character(client, bank)` extends the sheet with an action
queue. `set_character(name)` loads the state from the server; the `add_*`
methods queue `CharacterOrder` values; `update(elapsed_time)` counts the
cooldown down and, once it has run out, sends the next order, stores the
returned state and adds a 0.5 second margin to the server's cooldown. A move
to the tile the character already stands on is skipped. After every bank
order the `bank` object's `update_cache()` is called. When the whole batch has
been sent, the queue is cleared and `is_empty()` turns true.

`ammobot.training_manager.TrainingManager(item_crafting_manager)` picks a
training item for a skill level and asks the given object to craft one more of
it through `make_craft_item(character, item_order)`.

## What the package does not do

There is no command to run and no main loop. The package does not decide on
its own what a character should do next: it provides no systems that fill the
action queue, no bank-content tracker to pass as the `bank`, no planner that
works out how to obtain or craft an item, and no fight estimation. Those have
to be supplied by the code using it.

## Running the tests

The test suite uses pytest and is installed with the `test` extra.