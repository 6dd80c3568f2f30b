"""Settings window for the save reminder."""

from __future__ import annotations

from collections.abc import Callable

from PySide6 import QtCore, QtGui, QtWidgets

from savereminder.config import MAX_FONT_SIZE, MIN_FONT_SIZE, ReminderSettings
from savereminder.core.color import RGBA
from savereminder.logging import get_logger
from savereminder.ui.overlay import to_qcolor

FLASH_SPEED_MIN = 0.1
FLASH_SPEED_MAX = 5.0
# Flash speed slider works in hundredths.
_SPEED_STEPS = 100


class SettingsWindow(QtWidgets.QWidget):
    """Edits :class:`ReminderSettings`, saving on every change and on close."""

    def __init__(
        self,
        load: Callable[[], ReminderSettings],
        save: Callable[[ReminderSettings], None],
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent, QtCore.Qt.WindowType.Window)
        self._load = load
        self._save = save
        self.logger = get_logger("ui.settings")
        self.settings = load()

        self.setWindowTitle("Save Reminder")
        self.setMinimumSize(300, 280)
        self._build_layout()
        self._populate()

    def _build_layout(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QLabel("Save Reminder Settings")
        font = header.font()
        font.setBold(True)
        header.setFont(font)
        layout.addWidget(header)

        row = QtWidgets.QHBoxLayout()
        self.enabled_box = QtWidgets.QCheckBox()
        self.enabled_label = QtWidgets.QLabel()
        label_font = self.enabled_label.font()
        label_font.setPointSize(14)
        label_font.setBold(True)
        self.enabled_label.setFont(label_font)
        row.addWidget(self.enabled_box)
        row.addWidget(self.enabled_label, 1)
        layout.addLayout(row)

        self.options = QtWidgets.QWidget()
        form = QtWidgets.QFormLayout(self.options)

        self.warning_spin = QtWidgets.QSpinBox()
        self.warning_spin.setRange(0, 10_000_000)
        form.addRow("Warning After (sec)", self.warning_spin)

        self.flash_box = QtWidgets.QCheckBox()
        form.addRow("Flash Text", self.flash_box)

        self.flash_note = QtWidgets.QLabel(
            "The flashing animation only works correctly while the viewports keep repainting."
        )
        self.flash_note.setWordWrap(True)
        self.flash_note.setObjectName("FlashNote")
        form.addRow(self.flash_note)

        self.speed_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.speed_slider.setRange(
            int(FLASH_SPEED_MIN * _SPEED_STEPS), int(FLASH_SPEED_MAX * _SPEED_STEPS)
        )
        self.speed_label = QtWidgets.QLabel()
        speed_row = QtWidgets.QHBoxLayout()
        speed_row.addWidget(self.speed_slider, 1)
        speed_row.addWidget(self.speed_label)
        self.speed_caption = QtWidgets.QLabel("Flash Speed")
        form.addRow(self.speed_caption, speed_row)

        self.color_button = QtWidgets.QPushButton()
        self.color_button.setObjectName("ColorSwatch")
        form.addRow("Text Color", self.color_button)

        self.font_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.font_slider.setRange(MIN_FONT_SIZE, MAX_FONT_SIZE)
        self.font_label = QtWidgets.QLabel()
        font_row = QtWidgets.QHBoxLayout()
        font_row.addWidget(self.font_slider, 1)
        font_row.addWidget(self.font_label)
        form.addRow("Font Size", font_row)

        layout.addWidget(self.options)
        layout.addStretch(1)

        self.enabled_box.toggled.connect(self._on_enabled)
        self.warning_spin.valueChanged.connect(self._on_warning_time)
        self.flash_box.toggled.connect(self._on_flash)
        self.speed_slider.valueChanged.connect(self._on_speed)
        self.color_button.clicked.connect(self._pick_color)
        self.font_slider.valueChanged.connect(self._on_font_size)

    def _populate(self) -> None:
        s = self.settings
        widgets = (
            self.enabled_box,
            self.warning_spin,
            self.flash_box,
            self.speed_slider,
            self.font_slider,
        )
        blockers = [QtCore.QSignalBlocker(w) for w in widgets]
        self.enabled_box.setChecked(s.enabled)
        self.warning_spin.setValue(s.warning_time_seconds)
        self.flash_box.setChecked(s.flash)
        self.speed_slider.setValue(round(max(s.flash_speed, FLASH_SPEED_MIN) * _SPEED_STEPS))
        self.font_slider.setValue(s.font_size)
        for blocker in blockers:
            blocker.unblock()
        self._refresh()

    def _refresh(self) -> None:
        s = self.settings
        if s.enabled:
            self.enabled_label.setText("Save Reminder ENABLED")
            self.enabled_label.setStyleSheet("color: green;")
        else:
            self.enabled_label.setText("Save Reminder DISABLED")
            self.enabled_label.setStyleSheet("color: red;")
        self.options.setEnabled(s.enabled)
        for widget in (self.flash_note, self.speed_caption, self.speed_slider, self.speed_label):
            widget.setVisible(s.flash)
        self.speed_label.setText(f"{s.flash_speed:.2f}")
        self.font_label.setText(str(s.font_size))
        self.color_button.setText(f"#{s.text_color}")
        swatch = to_qcolor(s.color())
        self.color_button.setStyleSheet(
            f"background: {swatch.name(QtGui.QColor.NameFormat.HexArgb)};"
        )

    def _commit(self, **update) -> None:
        self.settings = ReminderSettings.model_validate(
            {**self.settings.model_dump(), **update}
        )
        self._apply()

    def _apply(self) -> None:
        self._save(self.settings)
        self._refresh()

    def _on_enabled(self, checked: bool) -> None:
        self._commit(enabled=checked)

    def _on_warning_time(self, value: int) -> None:
        self._commit(warning_time_seconds=max(0, value))

    def _on_flash(self, checked: bool) -> None:
        updated = self.settings.with_flash(checked)
        if checked:
            speed = min(max(updated.flash_speed, FLASH_SPEED_MIN), FLASH_SPEED_MAX)
            updated = updated.model_copy(update={"flash_speed": speed})
            with QtCore.QSignalBlocker(self.speed_slider):
                self.speed_slider.setValue(round(speed * _SPEED_STEPS))
        self.settings = updated
        self._apply()

    def _on_speed(self, value: int) -> None:
        if self.settings.flash:
            self._commit(flash_speed=value / _SPEED_STEPS)

    def _on_font_size(self, value: int) -> None:
        self._commit(font_size=value)

    def _pick_color(self) -> None:
        initial = to_qcolor(self.settings.color())
        chosen = QtWidgets.QColorDialog.getColor(
            initial,
            self,
            "Text Color",
            QtWidgets.QColorDialog.ColorDialogOption.ShowAlphaChannel,
        )
        if not chosen.isValid():
            return
        color = RGBA(chosen.redF(), chosen.greenF(), chosen.blueF(), chosen.alphaF())
        self._commit(text_color=color.to_hex())

    def showEvent(self, event: QtGui.QShowEvent) -> None:  # noqa: N802
        self.settings = self._load()
        self._populate()
        super().showEvent(event)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802
        self._save(self.settings)
        self.logger.debug("Settings window closed")
        super().closeEvent(event)
