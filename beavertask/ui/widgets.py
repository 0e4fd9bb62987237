from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from beavertask.views.calendar_grid import CalendarCell
from beavertask.views.details import DetailRow
from beavertask.views.task_list import ListRow


def repolish(widget: QWidget) -> None:
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class CalendarCellButton(QPushButton):
    def __init__(self, cell: CalendarCell, on_click, parent=None):
        super().__init__(str(cell.day), parent)
        self.cell = cell
        self.setObjectName("CalendarCell")
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(40, 40)
        self.setCursor(Qt.PointingHandCursor)
        self.setProperty("inactive", cell.inactive)
        self.setProperty("today", cell.today)
        self.setProperty("selected", cell.selected)
        self.setProperty("hasEvents", cell.has_events)
        self.setToolTip(cell.key)
        self.clicked.connect(lambda: on_click(cell.date))
        repolish(self)


class TaskRowWidget(QFrame):
    """One task row; handlers are bound fresh every time the row is built."""

    def __init__(
        self,
        row: DetailRow | ListRow,
        on_toggle,
        on_delete,
        delete_label: str = "×",
        parent=None,
    ):
        super().__init__(parent)
        self.task_id = row.task_id
        self.setObjectName("TaskItem")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(10)

        self.checkbox = QCheckBox()
        self.checkbox.setObjectName("TaskCheckbox")
        self.checkbox.setChecked(row.completed)
        self._completed = row.completed
        self._on_toggle = on_toggle
        self.checkbox.clicked.connect(self._handle_toggle)

        info = QVBoxLayout()
        info.setSpacing(2)

        title_row = QHBoxLayout()
        title_row.setSpacing(6)
        color = getattr(row, "color", "")
        if color:
            dot = QLabel()
            dot.setObjectName("TaskColorDot")
            dot.setFixedSize(10, 10)
            dot.setStyleSheet(f"background: {color}; border-radius: 5px;")
            title_row.addWidget(dot, 0, Qt.AlignVCenter)

        title = QLabel(row.title)
        title.setProperty("class", "task-title")
        title.setProperty("completed", row.completed)
        title.setWordWrap(True)
        title_row.addWidget(title, 1)
        info.addLayout(title_row)

        if row.meta:
            meta = QLabel(row.meta)
            meta.setProperty("class", "task-meta")
            meta.setWordWrap(True)
            info.addWidget(meta)

        self.delete_button = QPushButton(delete_label)
        self.delete_button.setProperty("variant", "ghost")
        self.delete_button.setObjectName("TaskDeleteButton")
        self.delete_button.clicked.connect(lambda _checked=False: on_delete(self.task_id))

        layout.addWidget(self.checkbox, 0, Qt.AlignTop)
        layout.addLayout(info, 1)
        layout.addWidget(self.delete_button, 0, Qt.AlignTop)

    def _handle_toggle(self, _checked: bool = False) -> None:
        # The row reflects the store, not the click, until the refetch lands.
        self.checkbox.setChecked(self._completed)
        self._on_toggle(self.task_id)


class EmptyState(QFrame):
    def __init__(self, icon: str, text: str, parent=None):
        super().__init__(parent)
        self.setObjectName("EmptyState")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 24, 16, 24)
        layout.setSpacing(8)

        icon_label = QLabel(icon)
        icon_label.setProperty("class", "empty-icon")
        icon_label.setAlignment(Qt.AlignCenter)

        text_label = QLabel(text)
        text_label.setProperty("class", "empty-text")
        text_label.setAlignment(Qt.AlignCenter)
        text_label.setWordWrap(True)

        layout.addWidget(icon_label)
        layout.addWidget(text_label)
