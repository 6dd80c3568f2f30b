"""Warning banner painted over an editor viewport."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from savereminder.core.color import RGBA
from savereminder.core.timer import Banner

BANNER_HEIGHT = 50
SHADOW_OFFSET = 2


def to_qcolor(color: RGBA) -> QtGui.QColor:
    return QtGui.QColor.fromRgbF(color.r, color.g, color.b, color.a)


class WarningOverlay(QtWidgets.QWidget):
    """Transparent, click-through layer that follows its parent's size."""

    def __init__(self, parent: QtWidgets.QWidget) -> None:
        super().__init__(parent)
        self.setObjectName("WarningOverlay")
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_NoSystemBackground)
        self._banner: Banner | None = None
        parent.installEventFilter(self)
        self.setGeometry(parent.rect())
        self.raise_()

    @property
    def banner(self) -> Banner | None:
        return self._banner

    def show_banner(self, banner: Banner | None) -> None:
        if banner is None and self._banner is None:
            return
        self._banner = banner
        self.update()

    def eventFilter(self, watched: QtCore.QObject, event: QtCore.QEvent) -> bool:  # noqa: N802
        if watched is self.parent() and event.type() == QtCore.QEvent.Type.Resize:
            self.setGeometry(self.parent().rect())
            self.raise_()
        return super().eventFilter(watched, event)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: N802
        if self._banner is None:
            return

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.TextAntialiasing)
        font = QtGui.QFont(self.font())
        font.setBold(True)
        font.setPixelSize(self._banner.font_size)
        painter.setFont(font)

        rect = QtCore.QRect(0, 0, self.width(), BANNER_HEIGHT)
        flags = QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignHCenter
        color = to_qcolor(self._banner.color)

        shadow = QtGui.QColor(0, 0, 0)
        shadow.setAlphaF(0.6 * color.alphaF())
        painter.setPen(shadow)
        painter.drawText(rect.translated(SHADOW_OFFSET, SHADOW_OFFSET), flags, self._banner.message)

        painter.setPen(color)
        painter.drawText(rect, flags, self._banner.message)
        painter.end()
