"""Drag-and-drop fitting model: items bought into an inventory and fitted into slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """A slot that can hold one item."""

    id: int
    label: str
    item: Optional[str] = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an inventory item into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


def _default_slots() -> list[Slot]:
    return [Slot(id=number, label=label) for number, label in enumerate(SLOT_LABELS, start=1)]


@dataclass
class Fitting:
    """Inventory, slots and the command produced by the latest drop."""

    inventory: list[str] = field(default_factory=list)
    slots: list[Slot] = field(default_factory=_default_slots)
    item_dragging: bool = False
    fit_command: Optional[FittingCommand] = None

    def buy(self, item: str) -> None:
        """Add an item to the inventory."""
        self.inventory.append(item)

    def slot(self, slot_id: int) -> Slot:
        """The slot with the given id."""
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        raise KeyError(slot_id)

    def set_item(self, slot_id: int, item: Optional[str]) -> None:
        """Place ``item`` in a slot; unknown slots are ignored."""
        for slot in self.slots:
            if slot.id == slot_id:
                slot.item = item
                return

    def drop_from_slot(self, origin_slot: int, target_slot: Optional[int]) -> FittingCommand:
        """Record dropping a slot's item onto another slot, or outside any slot."""
        if self.slot(origin_slot).item is None:
            raise ValueError(f"slot {origin_slot} holds no item to drag")
        command: FittingCommand
        if target_slot is not None:
            command = Refit(target_slot=target_slot, origin_slot=origin_slot)
        else:
            command = Unfit(target_slot=origin_slot)
        self.fit_command = command
        return command

    def drop_from_inventory(self, index: int, target_slot: Optional[int]) -> Optional[Fit]:
        """Record dropping an inventory item; dropping outside a slot does nothing."""
        item = self.inventory[index]
        self.item_dragging = False
        if target_slot is None:
            return None
        command = Fit(target_slot=target_slot, item=item)
        self.fit_command = command
        return command

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        if isinstance(command, Unfit):
            self.set_item(command.target_slot, None)
        elif isinstance(command, Fit):
            self.set_item(command.target_slot, command.item)
        elif isinstance(command, Refit):
            origin_item = next(
                (slot.item for slot in self.slots if slot.id == command.origin_slot), None
            )
            self.set_item(command.target_slot, origin_item)
            self.set_item(command.origin_slot, None)
        else:
            raise TypeError(f"unknown fitting command: {command!r}")

    def apply_pending(self) -> Optional[FittingCommand]:
        """Apply and clear the recorded command, returning it."""
        command, self.fit_command = self.fit_command, None
        if command is not None:
            self.apply(command)
        return command