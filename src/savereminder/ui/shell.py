"""Main PySide editor shell hosting the save reminder."""
from __future__ import annotations

from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from savereminder.core.app import ReminderContext
from savereminder.core.events import EDITOR_RELOADED
from savereminder.logging import get_logger
from savereminder.ui.overlay import WarningOverlay
from savereminder.ui.settings_window import SettingsWindow


class DocumentEditor(QtWidgets.QPlainTextEdit):
    """Plain-text editor bound to one registry entry."""

    def __init__(self, name: str, path: Path | None = None, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.name = name
        self.path = path
        self.setTabStopDistance(4 * self.fontMetrics().horizontalAdvance(" "))


class EditorWindow(QtWidgets.QMainWindow):
    def __init__(self, ctx: ReminderContext) -> None:
        super().__init__()
        self.ctx = ctx
        self.logger = get_logger("ui.shell")
        self._untitled = 0
        self._settings_window: SettingsWindow | None = None

        self._setup_window()
        self._build_layout()
        self._build_menus()
        self._start_ticker()
        self.new_document()

    def _setup_window(self) -> None:
        self.setWindowTitle("save-reminder editor")
        self.resize(1100, 640)

    def _build_layout(self) -> None:
        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)

        self.tab_widget = QtWidgets.QTabWidget()
        self.tab_widget.setTabsClosable(True)
        self.tab_widget.setMovable(True)
        self.tab_widget.tabCloseRequested.connect(self._close_tab)
        self.tab_widget.currentChanged.connect(self._refresh_preview)
        splitter.addWidget(self.tab_widget)

        self.preview = QtWidgets.QTextBrowser()
        self.preview.setObjectName("Preview")
        splitter.addWidget(self.preview)
        splitter.setSizes([660, 440])

        self.setCentralWidget(splitter)

        self.authoring_overlay = WarningOverlay(self.tab_widget)
        self.preview_overlay = WarningOverlay(self.preview)

        self.status_label = QtWidgets.QLabel("Ready")
        self.statusBar().addWidget(self.status_label, 1)

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        self._add_action(file_menu, "&New", self.new_document, QtGui.QKeySequence.StandardKey.New)
        self._add_action(file_menu, "&Open…", self.open_document, QtGui.QKeySequence.StandardKey.Open)
        self._add_action(file_menu, "&Save", self.save_current, QtGui.QKeySequence.StandardKey.Save)
        self._add_action(file_menu, "Save &All", self.save_all, QtGui.QKeySequence("Ctrl+Shift+S"))
        file_menu.addSeparator()
        self._add_action(file_menu, "&Quit", self.close, QtGui.QKeySequence.StandardKey.Quit)

        run_menu = self.menuBar().addMenu("&Run")
        self.preview_mode_action = self._add_action(run_menu, "&Preview Mode", self._toggle_preview_mode, QtGui.QKeySequence("F5"))
        self.preview_mode_action.setCheckable(True)

        tools_menu = self.menuBar().addMenu("&Tools")
        self._add_action(tools_menu, "Save &Reminder…", self.show_settings)
        self._add_action(tools_menu, "Reload &Plugins", self._reload_plugins)

    def _add_action(self, menu: QtWidgets.QMenu, text: str, slot, shortcut=None) -> QtGui.QAction:
        action = QtGui.QAction(text, self)
        if shortcut is not None:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _start_ticker(self) -> None:
        self._ticker = QtCore.QTimer(self)
        self._ticker.setInterval(self.ctx.settings.ui.tick_ms)
        self._ticker.timeout.connect(self._on_tick)
        self._ticker.start()

    def _on_tick(self) -> None:
        banner = self.ctx.session.tick()
        self.authoring_overlay.show_banner(banner)
        self.preview_overlay.show_banner(banner)

    def _current_editor(self) -> DocumentEditor | None:
        widget = self.tab_widget.currentWidget()
        return widget if isinstance(widget, DocumentEditor) else None

    def _editors(self) -> list[DocumentEditor]:
        return [self.tab_widget.widget(i) for i in range(self.tab_widget.count())]

    def _add_editor(self, editor: DocumentEditor, text: str = "") -> None:
        self.ctx.documents.open(editor.name, editor.path)
        editor.setPlainText(text)
        editor.document().setModified(False)
        editor.document().modificationChanged.connect(
            lambda modified, e=editor: self._on_modified(e, modified)
        )
        editor.textChanged.connect(self._refresh_preview)
        index = self.tab_widget.addTab(editor, self._tab_title(editor))
        self.tab_widget.setCurrentIndex(index)

    def _tab_title(self, editor: DocumentEditor) -> str:
        title = editor.path.name if editor.path else editor.name
        return f"{title} *" if editor.document().isModified() else title

    def _on_modified(self, editor: DocumentEditor, modified: bool) -> None:
        if modified:
            self.ctx.documents.mark_dirty(editor.name)
        else:
            self.ctx.documents.mark_clean(editor.name)
        index = self.tab_widget.indexOf(editor)
        if index >= 0:
            self.tab_widget.setTabText(index, self._tab_title(editor))

    def _refresh_preview(self) -> None:
        editor = self._current_editor()
        self.preview.setMarkdown(editor.toPlainText() if editor else "")

    def new_document(self) -> None:
        self._untitled += 1
        self._add_editor(DocumentEditor(f"untitled-{self._untitled}"))

    def open_document(self) -> None:
        filename, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Open document")
        if not filename:
            return
        path = Path(filename)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to open {path}: {e}")
            self.status_label.setText(f"Could not open {path.name}")
            return
        if str(path) in self.ctx.documents:
            self.status_label.setText(f"{path.name} is already open")
            return
        self._add_editor(DocumentEditor(str(path), path), text)

    def save_document(self, editor: DocumentEditor) -> bool:
        if editor.path is None:
            filename, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save document", editor.name)
            if not filename:
                return False
            editor.path = Path(filename)
        try:
            editor.path.write_text(editor.toPlainText(), encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Failed to save {editor.path}: {e}")
            self.status_label.setText(f"Save failed: {editor.path.name}")
            return False
        editor.document().setModified(False)
        self.ctx.documents.get(editor.name).path = editor.path
        self.ctx.documents.mark_saved(editor.name)
        self.status_label.setText(f"Saved {editor.path.name}")
        return True

    def save_current(self) -> None:
        editor = self._current_editor()
        if editor is not None:
            self.save_document(editor)

    def save_all(self) -> None:
        for editor in self._editors():
            if editor.document().isModified():
                self.save_document(editor)

    def _close_tab(self, index: int) -> None:
        editor = self.tab_widget.widget(index)
        if editor.document().isModified():
            answer = QtWidgets.QMessageBox.question(
                self,
                "Unsaved changes",
                f"Save changes to {self._tab_title(editor).rstrip(' *')}?",
                QtWidgets.QMessageBox.StandardButton.Save
                | QtWidgets.QMessageBox.StandardButton.Discard
                | QtWidgets.QMessageBox.StandardButton.Cancel,
            )
            if answer == QtWidgets.QMessageBox.StandardButton.Cancel:
                return
            if answer == QtWidgets.QMessageBox.StandardButton.Save and not self.save_document(editor):
                return
        self.tab_widget.removeTab(index)
        self.ctx.documents.close(editor.name)
        editor.deleteLater()

    def _toggle_preview_mode(self, checked: bool) -> None:
        self.ctx.documents.set_simulating(checked)
        self.status_label.setText("Preview mode" if checked else "Ready")

    def _reload_plugins(self) -> None:
        self.logger.info("Reloading plugins")
        self.ctx.events.emit(EDITOR_RELOADED)
        self.status_label.setText("Plugins reloaded")

    def show_settings(self) -> None:
        if self._settings_window is None:
            self._settings_window = SettingsWindow(
                load=self.ctx.load_reminder,
                save=self.ctx.update_reminder,
                parent=self,
            )
        self._settings_window.show()
        self._settings_window.raise_()
        self._settings_window.activateWindow()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802
        self._ticker.stop()
        if self._settings_window is not None:
            self._settings_window.close()
        self.ctx.stop()
        super().closeEvent(event)
