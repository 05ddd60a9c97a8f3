"""HTTP client for the game's REST API."""

from __future__ import annotations

import logging
from typing import Any, Iterator

import requests

from .types import EquipOrder, ItemOrder, MapCoord, UnequipOrder

log = logging.getLogger(__name__)

PAGE_SIZE = 100

ActionResult = tuple[int, Any]


class ApiError(RuntimeError):
    """Raised when a request fails or the server answers with an error."""

    def __init__(self, message: str, *, path: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status = status


def load_token(path: str) -> str:
    """Return the first line of the token file, or an empty string if it is missing."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.readline().rstrip("\r\n")
    except FileNotFoundError:
        return ""


class Client:
    """Talks to the game server: static data queries and character actions."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        *,
        session: Any = None,
        verify: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Authorization": "Bearer " + token,
            }
        )
        self._verify = verify
        self._timeout = timeout

    # -- transport -------------------------------------------------------

    def _url(self, path: str) -> str:
        return self._base_url + path

    @staticmethod
    def _decode(response: Any, path: str) -> Any:
        if response.status_code != 200:
            raise ApiError(
                f"path: '{path}' status: '{response.status_code}'",
                path=path,
                status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"path: '{path}' invalid JSON body", path=path) from exc

    def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        log.debug("GET - path: '%s'", path)
        try:
            response = self._session.get(
                self._url(path), params=params or {}, timeout=self._timeout, verify=self._verify
            )
        except requests.RequestException as exc:
            raise ApiError(str(exc), path=path) from exc
        return self._decode(response, path)

    def _post(self, path: str, body: Any = None) -> Any:
        log.debug("POST - path: '%s'", path)
        kwargs: dict[str, Any] = {"timeout": self._timeout, "verify": self._verify}
        if body is not None:
            kwargs["json"] = body
        try:
            response = self._session.post(self._url(path), **kwargs)
        except requests.RequestException as exc:
            raise ApiError(str(exc), path=path) from exc
        if response.status_code != 200 and body is not None:
            log.debug("rejected body: %r", body)
        return self._decode(response, path)

    def _pages(self, path: str, *, include_last: bool = True) -> Iterator[Any]:
        page = 1
        page_count = 2
        while page <= page_count if include_last else page < page_count:
            log.debug("path: '%s' page %d", path, page)
            body = self._get_json(path, {"page": str(page), "size": str(PAGE_SIZE)})
            page_count = body["pages"] or 0
            yield from body["data"] or []
            page += 1

    # -- static data -----------------------------------------------------

    def get_items(self) -> dict[str, Any]:
        """All items, keyed by item code."""
        return {item["code"]: item for item in self._pages("/items", include_last=False)}

    def get_monsters(self) -> dict[str, Any]:
        """All monsters, keyed by monster code."""
        return {monster["code"]: monster for monster in self._pages("/monsters", include_last=False)}

    def get_maps(self) -> list[Any]:
        return list(self._pages("/maps"))

    def get_resource_spots(self) -> list[Any]:
        return list(self._pages("/resources"))

    def get_characters(self) -> list[str]:
        """Names of the account's characters."""
        body = self._get_json("/my/characters")
        return [entry["name"] for entry in body["data"]]

    def get_bank_items(self) -> list[Any]:
        """Item stacks held in the bank."""
        return list(self._pages("/my/bank/items"))

    def get_bank_detail(self) -> Any:
        return self._get_json("/my/bank")

    def get_npc_items(self) -> list[Any]:
        return list(self._pages("/npcs/items"))

    def get_map_with_content_code(self, content_code: str) -> MapCoord:
        """Position of the first map tile holding the given content."""
        body = self._get_json("/maps", {"content_code": content_code})
        data = body["data"]
        if not data:
            raise ApiError(f"no map holds '{content_code}'", path="/maps")
        return MapCoord.from_dict(data[0])

    def get_character(self, name: str) -> Any:
        """The full state of one character."""
        return self._get_json(f"/characters/{name}")["data"]

    # -- actions ---------------------------------------------------------

    def _act(self, name: str, action: str, body: Any = None, key: str = "character") -> ActionResult:
        data = self._post(f"/my/{name}/action/{action}", body)["data"]
        return int(data["cooldown"]["remaining_seconds"]), data[key]

    def move(self, name: str, coord: MapCoord) -> ActionResult:
        return self._act(name, "move", coord.to_dict())

    def fight(self, name: str) -> ActionResult:
        """Fight the monster on the current tile; the state comes back as a list."""
        return self._act(name, "fight", key="characters")

    def rest(self, name: str) -> ActionResult:
        return self._act(name, "rest")

    def craft(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "crafting", item.to_dict())

    def use_item(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "use", item.to_dict())

    def recycle(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "recycling", item.to_dict())

    def task_new(self, name: str) -> ActionResult:
        return self._act(name, "task/new")

    def task_trade(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "task/trade", item.to_dict())

    def task_complete(self, name: str) -> ActionResult:
        return self._act(name, "task/complete")

    def unequip_item(self, name: str, slot: str) -> ActionResult:
        return self._act(name, "unequip", UnequipOrder(slot).to_dict())

    def equip_item(self, name: str, slot: str, item_code: str) -> ActionResult:
        return self._act(name, "equip", EquipOrder(item_code, slot).to_dict())

    def gather(self, name: str) -> ActionResult:
        return self._act(name, "gathering")

    def deposit_item(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "bank/deposit/item", [item.to_dict()])

    def withdraw_item(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "bank/withdraw/item", [item.to_dict()])

    def deposit_gold(self, name: str, amount: int) -> ActionResult:
        return self._act(name, "bank/deposit/gold", {"quantity": amount})

    def withdraw_gold(self, name: str, amount: int) -> ActionResult:
        return self._act(name, "bank/withdraw/gold", {"quantity": amount})

    def buy_item(self, name: str, item: ItemOrder) -> ActionResult:
        return self._act(name, "npc/buy", item.to_dict())