"""Standard button texts and symbol image names per action."""

from __future__ import annotations

from keyhue_core.context import ContextState
from keyhue_core.models import ActionKind, KeyboardAction, KeyboardCase, KeyboardTypeKind, ReturnKeyType, SystemKey


_SYSTEM_IMAGES = {
    SystemKey.NEXT_KEYBOARD: "globe",
    SystemKey.NEXT_LOCALE: "globe",
    SystemKey.DICTATION: "mic",
    SystemKey.DISMISS_KEYBOARD: "keyboard.chevron.compact.down",
    SystemKey.SETTINGS: "gearshape",
    SystemKey.TAB: "arrow.right.to.line",
    SystemKey.MOVE_CURSOR_BACKWARD: "arrow.left",
    SystemKey.MOVE_CURSOR_FORWARD: "arrow.right",
}

_SHIFT_IMAGES = {
    KeyboardCase.AUTO: "shift",
    KeyboardCase.LOWERCASED: "shift",
    KeyboardCase.UPPERCASED: "shift.fill",
    KeyboardCase.CAPS_LOCKED: "capslock.fill",
}

_RETURN_TEXTS = {
    ReturnKeyType.RETURN: "return",
    ReturnKeyType.DONE: "done",
    ReturnKeyType.GO: "go",
    ReturnKeyType.OK: "OK",
    ReturnKeyType.SEARCH: "search",
    ReturnKeyType.CUSTOM: "return",
}

_KEYBOARD_TYPE_TEXTS = {
    KeyboardTypeKind.ALPHABETIC: "ABC",
    KeyboardTypeKind.NUMERIC: "123",
    KeyboardTypeKind.SYMBOLIC: "#+=",
    KeyboardTypeKind.EMAIL: "@",
    KeyboardTypeKind.URL: ".com",
}


def standard_button_image(action: KeyboardAction, context: ContextState) -> str | None:
    kind = action.kind
    if kind == ActionKind.BACKSPACE:
        return "delete.left"
    if kind == ActionKind.SHIFT:
        return _SHIFT_IMAGES[action.case or KeyboardCase.LOWERCASED]
    if kind == ActionKind.PRIMARY and action.return_key == ReturnKeyType.NEW_LINE:
        return "arrow.turn.down.left"
    if kind == ActionKind.KEYBOARD_TYPE and action.keyboard_type is not None:
        if action.keyboard_type.kind == KeyboardTypeKind.EMOJIS:
            return "face.smiling"
        if action.keyboard_type.kind == KeyboardTypeKind.IMAGES:
            return "photo"
        return None
    if kind == ActionKind.SYSTEM and action.system_key is not None:
        if action.system_key == SystemKey.DICTATION and context.keyboard_dictation_replacement is not None:
            return standard_button_image(context.keyboard_dictation_replacement, context)
        return _SYSTEM_IMAGES.get(action.system_key)
    return None


def standard_button_text(action: KeyboardAction, context: ContextState) -> str | None:
    kind = action.kind
    if kind in (ActionKind.CHARACTER, ActionKind.EMOJI):
        return action.text
    if kind == ActionKind.SPACE:
        return "space"
    if kind == ActionKind.PRIMARY:
        return _RETURN_TEXTS.get(action.return_key or ReturnKeyType.RETURN)
    if kind == ActionKind.KEYBOARD_TYPE and action.keyboard_type is not None:
        return _KEYBOARD_TYPE_TEXTS.get(action.keyboard_type.kind)
    if kind == ActionKind.SYSTEM and action.system_key == SystemKey.ESCAPE:
        return "esc"
    if kind == ActionKind.CUSTOM:
        return action.text
    return None


def content_bottom_margin(action: KeyboardAction) -> float:
    if action.kind != ActionKind.CHARACTER or not action.text:
        return 0.0
    if action.text in ("-", "/", ":", ";", "@"):
        return 3.0
    if action.text in ("(", ")"):
        return 4.0
    return 0.0
