"""Keyboard focus: tab navigation between widgets and focus queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterable

__all__ = [
    "TabGroup",
    "KeyPressEvent",
    "KeyCharEvent",
    "FocusTree",
    "FocusState",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabGroup:
    """Marks a subtree as holding tabbable elements.

    ``order`` ranks the group among other groups. A ``modal`` group keeps
    tabbing inside itself while the focus is within it; non-modal groups are
    cycled through together.
    """

    order: int = 0
    modal: bool = False


@dataclass(frozen=True)
class KeyPressEvent:
    """A key press aimed at the focused entity."""

    target: Hashable
    key_code: str
    repeat: bool
    shift: bool


@dataclass(frozen=True)
class KeyCharEvent:
    """A typed character aimed at the focused entity."""

    target: Hashable
    key: str


@dataclass
class _Node:
    parent: Hashable | None
    tab_index: int | None
    tab_group: TabGroup | None
    children: list[Hashable] = field(default_factory=list)


class FocusTree:
    """A hierarchy of UI nodes carrying tab indices and tab groups.

    A tab index of 0 or more makes a node reachable by sequential
    navigation; lower indices come first and equal indices keep tree order.
    A negative index makes a node focusable only by direct selection.
    """

    def __init__(self) -> None:
        self._nodes: dict[Hashable, _Node] = {}

    def add_node(
        self,
        entity: Hashable,
        parent: Hashable | None = None,
        tab_index: int | None = None,
        tab_group: TabGroup | None = None,
    ) -> None:
        """Add ``entity`` as the last child of ``parent`` (or as a root)."""
        if entity in self._nodes:
            raise ValueError(f"entity {entity!r} already in tree")
        if parent is not None:
            if parent not in self._nodes:
                raise KeyError(parent)
            self._nodes[parent].children.append(entity)
        self._nodes[entity] = _Node(parent, tab_index, tab_group)

    def parent_of(self, entity: Hashable) -> Hashable | None:
        """Return the parent of ``entity``, or None for roots and unknown entities."""
        node = self._nodes.get(entity)
        return node.parent if node is not None else None

    def is_descendant(self, entity: Hashable, ancestor: Hashable) -> bool:
        """True if ``entity`` is ``ancestor`` or lies beneath it."""
        current: Hashable | None = entity
        while current is not None:
            if current == ancestor:
                return True
            node = self._nodes.get(current)
            if node is None:
                return False
            current = node.parent
        return False

    def _group(self, entity: Hashable) -> TabGroup | None:
        # A group only takes part once it has children.
        node = self._nodes.get(entity)
        if node is None or node.tab_group is None or not node.children:
            return None
        return node.tab_group

    def _groups(self) -> list[tuple[Hashable, TabGroup]]:
        return [
            (entity, group)
            for entity in self._nodes
            if (group := self._group(entity)) is not None
        ]

    def navigate(self, focus: Hashable | None, reverse: bool = False) -> Hashable | None:
        """Return the entity to focus after ``focus``.

        With no current focus the first focusable entity is returned, or the
        last one when ``reverse`` is set. Returns None when nothing can be
        focused.
        """
        if not self._groups():
            _log.warning("No tab groups found")
            return None

        # The outermost group enclosing the focus decides the navigation scope.
        enclosing: tuple[Hashable, TabGroup] | None = None
        current = focus
        while current is not None:
            group = self._group(current)
            if group is not None:
                enclosing = (current, group)
            current = self.parent_of(current)

        return self._navigate_in_group(enclosing, focus, reverse)

    def _navigate_in_group(
        self,
        enclosing: tuple[Hashable, TabGroup] | None,
        focus: Hashable | None,
        reverse: bool,
    ) -> Hashable | None:
        focusable: list[tuple[Hashable, int]] = []
        if enclosing is not None and enclosing[1].modal:
            for child in self._nodes[enclosing[0]].children:
                self._gather_focusable(focusable, child)
        else:
            groups = sorted(
                (item for item in self._groups() if not item[1].modal),
                key=lambda item: item[1].order,
            )
            for entity, _ in groups:
                self._gather_focusable(focusable, entity)

        if not focusable:
            _log.warning("No focusable entities found")
            return None

        focusable.sort(key=lambda item: item[1])
        entities = [entity for entity, _ in focusable]
        count = len(entities)
        if focus in entities:
            index = entities.index(focus)
            step = -1 if reverse else 1
            return entities[(index + step) % count]
        return entities[-1] if reverse else entities[0]

    def _gather_focusable(self, out: list[tuple[Hashable, int]], entity: Hashable) -> None:
        node = self._nodes.get(entity)
        if node is None:
            return
        if node.tab_group is None:
            if node.tab_index is not None and node.tab_index >= 0:
                out.append((entity, node.tab_index))
            for child in node.children:
                # Nested tab groups are not entered from plain nodes.
                if self._group(child) is None:
                    self._gather_focusable(out, child)
        elif self._group(entity) is not None and not node.tab_group.modal:
            for child in node.children:
                self._gather_focusable(out, child)


@dataclass
class FocusState:
    """The focused entity and whether focus indicators are shown."""

    focus: Hashable | None = None
    visible: bool = False

    def auto_focus(self, entities: Iterable[Hashable]) -> Hashable | None:
        """Focus the first of the newly added auto-focus entities, if any."""
        for entity in entities:
            self.focus = entity
            break
        return self.focus

    def handle_tab(self, tree: FocusTree, shift: bool = False) -> Hashable | None:
        """Move focus in response to the Tab key; Shift moves backwards."""
        nxt = tree.navigate(self.focus, shift)
        if nxt is not None:
            self.focus = nxt
            self.visible = True
        return nxt

    def key_press(
        self, key_code: str, just_pressed: bool, shift: bool = False
    ) -> KeyPressEvent | None:
        """Route a key press to the focused entity, or None without focus."""
        if self.focus is None:
            return None
        return KeyPressEvent(self.focus, key_code, not just_pressed, shift)

    def key_chars(self, chars: Iterable[str]) -> list[KeyCharEvent]:
        """Route typed characters to the focused entity."""
        if self.focus is None:
            return []
        return [KeyCharEvent(self.focus, char) for char in chars]

    def is_focused(self, target: Hashable) -> bool:
        return self.focus is not None and self.focus == target

    def is_focus_visible(self, target: Hashable) -> bool:
        return self.visible and self.is_focused(target)

    def is_focus_within(self, tree: FocusTree, target: Hashable) -> bool:
        if self.focus is None:
            return False
        return tree.is_descendant(self.focus, target)

    def is_focus_within_visible(self, tree: FocusTree, target: Hashable) -> bool:
        return self.visible and self.is_focus_within(tree, target)