"""Desktop preview app runtime, view-model, and widget window."""

from __future__ import annotations

import os
import sys
from importlib import metadata

from PySide6.QtCore import QObject, Property, QTimer, Qt, Signal, Slot
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from keyhue_core import (
    AppConfig,
    ContextChange,
    ContextSynchronizer,
    DiagnosticsExporter,
    KeyboardContext,
    KeyboardType,
    KeyboardTypeKind,
    UpdateTurn,
    build_doctor_payload,
    load_config,
)
from keyhue_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from keyhue_host import HostSnapshot, Size, StaticHostProvider, TraitCollection
from keyhue_styling import KeyboardPreviewRenderer, get_theme, list_themes

NO_THEME = "(standard)"

_PHONE_PORTRAIT = Size(390.0, 844.0)
_PHONE_LANDSCAPE = Size(844.0, 390.0)


def _app_version() -> str:
    try:
        return metadata.version("keyhue")
    except metadata.PackageNotFoundError:
        return "0.1.0"


class KeyhueViewModel(QObject):
    previewChanged = Signal()
    statusTextChanged = Signal()
    themeNameChanged = Signal()
    colorSchemeChanged = Signal()
    localeTextChanged = Signal()
    appVersionChanged = Signal()

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        self.config: AppConfig = config or load_config()
        self.logger = get_logger()
        self.context = KeyboardContext()
        self.turn = UpdateTurn()
        self.synchronizer = ContextSynchronizer(
            self.context, self.turn, event_history=self.config.sync.event_history
        )
        self.host = StaticHostProvider(
            HostSnapshot(
                device_type="phone",
                orientation="portrait",
                screen_size=_PHONE_PORTRAIT,
                view_width=_PHONE_PORTRAIT.width,
                needs_input_mode_switch_key=True,
            )
        )
        self.renderer = KeyboardPreviewRenderer(
            width=self.config.preview.width,
            height=self.config.preview.height,
            key_height=self.config.preview.key_height,
        )
        self.diagnostics = DiagnosticsExporter()

        locales = self.config.keyboard_locales()
        self.context.set_locales(locales)
        self.context.set_locale(locales[0])

        self._app_version = _app_version()
        self._preview_png = b""
        self._status_text = ""
        self._theme_name = NO_THEME
        self._color_scheme = "light"
        self._locale_text = str(self.context.locale)
        self._rendered_generation = -1

        self._unsubscribe = self.context.subscribe(self._on_context_change)
        self.synchronizer.sync(self.host)
        self.synchronizer.sync_after_layout(self.host)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(self.config.sync.drain_ms)

    @Property(str, notify=appVersionChanged)
    def appVersion(self) -> str:
        return self._app_version

    @Property(bytes, notify=previewChanged)
    def previewPng(self) -> bytes:
        return self._preview_png

    @Property(str, notify=statusTextChanged)
    def statusText(self) -> str:
        return self._status_text

    @Property(str, notify=themeNameChanged)
    def themeName(self) -> str:
        return self._theme_name

    @Property(str, notify=colorSchemeChanged)
    def colorScheme(self) -> str:
        return self._color_scheme

    @Property(str, notify=localeTextChanged)
    def localeText(self) -> str:
        return self._locale_text

    def _set_text(self, field: str, value: str, signal: Signal) -> None:
        if getattr(self, field) != value:
            setattr(self, field, value)
            signal.emit()

    def _on_context_change(self, change: ContextChange) -> None:
        state = change.current
        self._set_text("_locale_text", str(state.locale), self.localeTextChanged)
        self._set_text("_color_scheme", state.color_scheme.value, self.colorSchemeChanged)

    def _tick(self) -> None:
        self.turn.drain()
        generation = self.context.generation
        if generation == self._rendered_generation:
            return
        self._rendered_generation = generation
        state = self.context.state
        self._preview_png = self.renderer.png_bytes(state)
        self.previewChanged.emit()
        self._set_text(
            "_status_text",
            f"{state.device_type.value} {state.interface_orientation.value} "
            f"{state.keyboard_type.kind.value} gen {generation}",
            self.statusTextChanged,
        )

    @Slot(str)
    def setThemeName(self, name: str) -> None:
        theme = None if name == NO_THEME else get_theme(name)
        if name != NO_THEME and theme is None:
            return
        self.turn.post(lambda: self.context.select_light_theme(theme))
        self.turn.post(lambda: self.context.select_dark_theme(theme))
        self._set_text("_theme_name", name, self.themeNameChanged)

    @Slot(str)
    def setColorScheme(self, style: str) -> None:
        traits = self.host.snapshot().trait_collection
        self.host.update(trait_collection=TraitCollection(
            user_interface_style=style,
            horizontal_size_class=traits.horizontal_size_class,
            vertical_size_class=traits.vertical_size_class,
            display_scale=traits.display_scale,
        ))
        self.synchronizer.sync(self.host)

    @Slot()
    def toggleOrientation(self) -> None:
        landscape = self.host.snapshot().orientation == "landscape_left"
        size = _PHONE_PORTRAIT if landscape else _PHONE_LANDSCAPE
        self.host.update(
            orientation="portrait" if landscape else "landscape_left",
            screen_size=size,
            view_width=size.width,
        )
        self.synchronizer.sync_after_layout(self.host)

    @Slot(str)
    def setKeyboardType(self, kind: str) -> None:
        keyboard_type = KeyboardType(KeyboardTypeKind(kind))
        if keyboard_type.kind == KeyboardTypeKind.ALPHABETIC:
            keyboard_type = KeyboardType.alphabetic()
        self.turn.post(lambda: self.context.set_keyboard_type(keyboard_type))

    @Slot()
    def selectNextLocale(self) -> None:
        self.turn.post(self.context.select_next_locale)

    @Slot()
    def exportDiagnostics(self) -> None:
        payload = build_doctor_payload(self.config, context=self.context.state, theme_count=len(list_themes()))
        path = self.diagnostics.bundle(
            cfg=self.config,
            doctor_payload=payload,
            recent_sync_events=self.synchronizer.recent_events(),
        )
        self._set_text("_status_text", f"Diagnostics exported to {path}", self.statusTextChanged)

    def shutdown(self) -> None:
        self._timer.stop()
        self._unsubscribe()


class PreviewWindow(QWidget):
    def __init__(self, vm: KeyhueViewModel) -> None:
        super().__init__()
        self.vm = vm
        self.setWindowTitle(f"Keyhue {vm.appVersion}")

        self.preview = QLabel()
        self.preview.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status = QLabel()

        self.themes = QComboBox()
        self.themes.addItems([NO_THEME, *list_themes()])
        self.themes.currentTextChanged.connect(vm.setThemeName)

        self.schemes = QComboBox()
        self.schemes.addItems(["light", "dark", "unspecified"])
        self.schemes.currentTextChanged.connect(vm.setColorScheme)

        self.keyboard_types = QComboBox()
        self.keyboard_types.addItems(
            [KeyboardTypeKind.ALPHABETIC.value, KeyboardTypeKind.NUMERIC.value, KeyboardTypeKind.SYMBOLIC.value]
        )
        self.keyboard_types.currentTextChanged.connect(vm.setKeyboardType)

        rotate = QPushButton("Rotate")
        rotate.clicked.connect(vm.toggleOrientation)
        self.locale_button = QPushButton(vm.localeText)
        self.locale_button.clicked.connect(vm.selectNextLocale)
        diagnostics = QPushButton("Export Diagnostics")
        diagnostics.clicked.connect(vm.exportDiagnostics)

        controls = QHBoxLayout()
        for widget in (self.themes, self.schemes, self.keyboard_types, rotate, self.locale_button, diagnostics):
            controls.addWidget(widget)

        layout = QVBoxLayout(self)
        layout.addLayout(controls)
        layout.addWidget(self.preview)
        layout.addWidget(self.status)

        vm.previewChanged.connect(self._show_preview)
        vm.statusTextChanged.connect(lambda: self.status.setText(vm.statusText))
        vm.localeTextChanged.connect(lambda: self.locale_button.setText(vm.localeText))

    def _show_preview(self) -> None:
        pixmap = QPixmap()
        pixmap.loadFromData(self.vm.previewPng, "PNG")
        self.preview.setPixmap(pixmap)


def run_gui() -> int:
    configure_logging()
    install_crash_hooks()
    logger = get_logger()

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QApplication(sys.argv)
    app.setApplicationName("Keyhue")

    vm = KeyhueViewModel()
    window = PreviewWindow(vm)
    window.show()

    exit_code = app.exec()
    vm.shutdown()
    logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    return int(exit_code)
