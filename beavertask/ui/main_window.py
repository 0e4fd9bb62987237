from __future__ import annotations

import logging
from datetime import date

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from beavertask.config import SETTINGS
from beavertask.domain.enums import ActiveView
from beavertask.infra.api_client import TaskApiClient
from beavertask.services.session import CalendarSession
from beavertask.services.task_store import MutationResult, Snapshot, TaskStore
from beavertask.views import details as details_view
from beavertask.views import task_list as task_list_view
from beavertask.views.calendar_grid import WEEKDAY_HEADERS, build_month_grid
from beavertask.views.details import build_day_details
from beavertask.views.modals import ModalCoordinator
from beavertask.views.task_list import group_tasks

from .background import BackgroundRunner
from .dialogs import AddTaskOverlay, DateJumpOverlay
from .widgets import CalendarCellButton, EmptyState, TaskRowWidget, repolish

logger = logging.getLogger(__name__)


def _clear_layout(layout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget:
            widget.deleteLater()
        elif item.layout():
            _clear_layout(item.layout())


class MainWindow(QWidget):
    def __init__(
        self,
        session: CalendarSession | None = None,
        runner: BackgroundRunner | None = None,
    ):
        super().__init__()
        self.setWindowTitle("BeaverTask")
        self._overlays: list = []
        self.resize(1180, 720)

        if session is None:
            session = CalendarSession(TaskStore(TaskApiClient(SETTINGS.api_base_url)))
        self.session = session
        self.store = session.store
        self.modals = ModalCoordinator()
        self.runner = runner or BackgroundRunner(self)

        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(12)

        main_layout.addWidget(self._build_sidebar())
        self.calendar_section = self._build_calendar_section()
        self.details_panel = self._build_details_panel()
        self.tasklist_section = self._build_tasklist_section()
        main_layout.addWidget(self.calendar_section, 3)
        main_layout.addWidget(self.details_panel, 2)
        main_layout.addWidget(self.tasklist_section, 5)
        self.tasklist_section.hide()

        self.add_overlay = AddTaskOverlay(self)
        self.add_overlay.submitted.connect(self.submit_task_form)
        self.add_overlay.cancelled.connect(self.close_task_modal)
        self.add_overlay.dismissed.connect(self.close_task_modal)
        self.add_overlay.all_day_check.toggled.connect(self.on_all_day_toggled)

        self.jump_overlay = DateJumpOverlay(self)
        self.jump_overlay.submitted.connect(self.submit_date_jump)
        self.jump_overlay.cancelled.connect(self.close_date_jump_modal)
        self.jump_overlay.dismissed.connect(self.close_date_jump_modal)
        self._overlays = [self.add_overlay, self.jump_overlay]

        QShortcut(QKeySequence("Esc"), self, self.on_escape)
        QShortcut(QKeySequence("Ctrl+N"), self, self.open_task_modal)

        self.today_badge.setText(self.session.today_badge)
        self.render_all()
        self.runner.submit(self.store.run_refresh, self._on_initialized)

    def _build_sidebar(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("Sidebar")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(8, 12, 8, 12)
        layout.setSpacing(8)

        self.today_badge = QLabel("")
        self.today_badge.setObjectName("CurrentDayBadge")
        self.today_badge.setAlignment(Qt.AlignCenter)

        self.calendar_icon = QPushButton("📅")
        self.calendar_icon.setObjectName("CalendarIcon")
        self.calendar_icon.clicked.connect(self.show_calendar_view)

        self.tasklist_icon = QPushButton("📋")
        self.tasklist_icon.setObjectName("TaskListIcon")
        self.tasklist_icon.clicked.connect(self.show_task_list_view)

        layout.addWidget(self.today_badge)
        layout.addWidget(self.calendar_icon)
        layout.addWidget(self.tasklist_icon)
        layout.addStretch()
        self._sync_view_icons()
        return frame

    def _build_calendar_section(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("CalendarSection")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        header = QHBoxLayout()
        prev_button = QPushButton("‹")
        prev_button.setProperty("variant", "ghost")
        prev_button.clicked.connect(lambda: self.change_month(-1))
        self.month_display = QLabel("")
        self.month_display.setProperty("class", "panel-title")
        self.month_display.setAlignment(Qt.AlignCenter)
        next_button = QPushButton("›")
        next_button.setProperty("variant", "ghost")
        next_button.clicked.connect(lambda: self.change_month(1))
        search_button = QPushButton("🔍")
        search_button.setProperty("variant", "secondary")
        search_button.clicked.connect(self.open_date_jump_modal)

        header.addWidget(prev_button)
        header.addWidget(self.month_display, 1)
        header.addWidget(next_button)
        header.addWidget(search_button)

        weekdays = QGridLayout()
        for column, name in enumerate(WEEKDAY_HEADERS):
            label = QLabel(name)
            label.setProperty("class", "weekday")
            label.setAlignment(Qt.AlignCenter)
            weekdays.addWidget(label, 0, column)

        self.calendar_grid = QGridLayout()
        self.calendar_grid.setSpacing(4)

        layout.addLayout(header)
        layout.addLayout(weekdays)
        layout.addLayout(self.calendar_grid, 1)
        return frame

    def _build_details_panel(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("DetailsPanel")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        header = QHBoxLayout()
        self.details_header = QLabel("")
        self.details_header.setProperty("class", "panel-title")
        add_button = QPushButton("+")
        add_button.setObjectName("DetailsAddButton")
        add_button.clicked.connect(self.open_task_modal)
        header.addWidget(self.details_header)
        header.addStretch()
        header.addWidget(add_button)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        content = QWidget()
        self.details_content = QVBoxLayout(content)
        self.details_content.setContentsMargins(0, 0, 0, 0)
        self.details_content.setSpacing(8)
        scroll.setWidget(content)

        layout.addLayout(header)
        layout.addWidget(scroll, 1)
        return frame

    def _build_tasklist_section(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("TaskListSection")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        title = QLabel("Tasks")
        title.setProperty("class", "panel-title")

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        content = QWidget()
        self.tasklist_content = QVBoxLayout(content)
        self.tasklist_content.setContentsMargins(0, 0, 0, 0)
        self.tasklist_content.setSpacing(12)
        scroll.setWidget(content)

        layout.addWidget(title)
        layout.addWidget(scroll, 1)
        return frame

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        for overlay in self._overlays:
            if overlay.isVisible():
                overlay.cover_parent()

    # Rendering

    def render_all(self) -> None:
        self.render_calendar()
        self.render_details()
        self.render_task_list()

    def render_calendar(self) -> None:
        grid = build_month_grid(
            self.session.current_year,
            self.session.current_month,
            self.store.tasks,
            self.session.selected_date,
            self.session.today,
        )
        self.month_display.setText(grid.label)
        _clear_layout(self.calendar_grid)
        for row_index, row in enumerate(grid.rows):
            for column, cell in enumerate(row):
                button = CalendarCellButton(cell, self.on_cell_clicked)
                self.calendar_grid.addWidget(button, row_index, column)

    def render_details(self) -> None:
        view = build_day_details(self.store.tasks, self.session.selected_date)
        self.details_header.setText(view.header)
        _clear_layout(self.details_content)
        if view.is_empty:
            self.details_content.addWidget(EmptyState("☺", view.empty_text))
        else:
            for row in view.rows:
                self.details_content.addWidget(
                    TaskRowWidget(row, self.toggle_task, self.confirm_delete_from_details)
                )
        self.details_content.addStretch()

    def render_task_list(self) -> None:
        _clear_layout(self.tasklist_content)
        if not self.store.tasks:
            self.tasklist_content.addWidget(EmptyState("📋", task_list_view.EMPTY_LIST_TEXT))
            self.tasklist_content.addStretch()
            return

        for group in group_tasks(self.store.tasks, self.session.today):
            title = QLabel(group.title)
            title.setProperty("class", "tasklist-group-title")
            self.tasklist_content.addWidget(title)
            for row in group.rows:
                self.tasklist_content.addWidget(
                    TaskRowWidget(row, self.toggle_task, self.confirm_delete_from_list, "🗑️")
                )
        self.tasklist_content.addStretch()

    # Navigation

    def on_cell_clicked(self, value: date) -> None:
        self.session.select_date(value)
        self.render_calendar()
        self.render_details()

    def change_month(self, offset: int) -> None:
        self.session.change_month(offset)
        self.render_calendar()
        self.render_details()

    def show_calendar_view(self) -> None:
        self.session.show_calendar()
        self.calendar_section.show()
        self.details_panel.show()
        self.tasklist_section.hide()
        self._sync_view_icons()

    def show_task_list_view(self) -> None:
        self.session.show_task_list()
        self.calendar_section.hide()
        self.details_panel.hide()
        self.tasklist_section.show()
        self._sync_view_icons()
        self.render_task_list()

    def _sync_view_icons(self) -> None:
        on_calendar = self.session.active_view == ActiveView.CALENDAR
        self.calendar_icon.setProperty("active", on_calendar)
        self.tasklist_icon.setProperty("active", not on_calendar)
        repolish(self.calendar_icon)
        repolish(self.tasklist_icon)

    # Store round-trips

    def _on_initialized(self, snapshot: Snapshot | None) -> None:
        if not self.session.complete_initialize(snapshot):
            logger.error("Failed to initialize BeaverTask: task list unavailable")
        self.today_badge.setText(self.session.today_badge)
        self.render_all()

    def _on_mutation_done(self, result: MutationResult | None) -> bool:
        if result is None:
            return False
        written = self.store.apply_mutation(result)
        if written:
            self.render_all()
        return written

    def toggle_task(self, task_id: str) -> None:
        fields = self.store.toggle_fields(task_id)
        if fields is None:
            return
        self.runner.submit(lambda: self.store.run_update(task_id, fields), self._on_mutation_done)

    def confirm_delete_from_details(self, task_id: str) -> None:
        self._confirm_delete(task_id, details_view.DELETE_CONFIRM_TEXT)

    def confirm_delete_from_list(self, task_id: str) -> None:
        self._confirm_delete(task_id, task_list_view.DELETE_CONFIRM_TEXT)

    def _confirm_delete(self, task_id: str, message: str) -> None:
        confirm = QMessageBox.question(self, "BeaverTask", message)
        if confirm != QMessageBox.Yes:
            return
        self.runner.submit(lambda: self.store.run_delete(task_id), self._on_mutation_done)

    # Add-task modal

    def open_task_modal(self) -> None:
        self.modals.add_task.open(self.session.selected_date)
        self.add_overlay.reset()
        self.add_overlay.sync(self.modals.add_task)

    def close_task_modal(self) -> None:
        self.modals.add_task.close()
        self.add_overlay.reset()
        self.add_overlay.sync(self.modals.add_task)

    def on_all_day_toggled(self, checked: bool) -> None:
        self.modals.add_task.set_all_day(checked)
        self.add_overlay.time_fields.setVisible(self.modals.add_task.time_fields_visible)

    def submit_task_form(self) -> None:
        modal = self.modals.add_task
        if not modal.is_open:
            return
        payload = modal.submit(self.add_overlay.read_form(), self.session.selected_date)
        if payload is None:
            self.add_overlay.title_input.setFocus()
            return
        self.runner.submit(lambda: self.store.run_create(payload), self._on_task_created)

    def _on_task_created(self, result: MutationResult | None) -> None:
        if self._on_mutation_done(result):
            self.close_task_modal()

    # Jump-to-date modal

    def open_date_jump_modal(self) -> None:
        self.modals.date_jump.open(self.session.selected_date)
        self.jump_overlay.sync(self.modals.date_jump)

    def close_date_jump_modal(self) -> None:
        self.modals.date_jump.close()
        self.jump_overlay.sync(self.modals.date_jump)

    def submit_date_jump(self) -> None:
        target = self.modals.date_jump.submit(self.jump_overlay.value())
        if target is None:
            return
        self.session.jump_to(target)
        self.render_calendar()
        self.render_details()
        self.close_date_jump_modal()

    def on_escape(self) -> None:
        closed = self.modals.escape()
        if closed == "add_task":
            self.add_overlay.reset()
            self.add_overlay.sync(self.modals.add_task)
        elif closed == "date_jump":
            self.jump_overlay.sync(self.modals.date_jump)
