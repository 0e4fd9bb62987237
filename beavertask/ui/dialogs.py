from __future__ import annotations

from PySide6.QtCore import QDate, QRegularExpression, Qt, QTimer, Signal
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QDateEdit,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QRadioButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from beavertask.domain.dates import date_key, parse_date_key
from beavertask.domain.enums import COLOR_SWATCHES, REMINDER_OPTIONS
from beavertask.views.modals import AddTaskModal, DateJumpModal, TaskForm

TIME_PATTERN = QRegularExpression(r"^([01]\d|2[0-3]):[0-5]\d$|^$")


def _complete_time(field: QLineEdit) -> str:
    # The validator lets partial input such as "1" or "09:" through while typing.
    return field.text() if field.hasAcceptableInput() else ""


class ModalOverlay(QFrame):
    """Backdrop covering the parent window with a centered card.

    Clicking the backdrop outside the card emits ``dismissed``.
    """

    dismissed = Signal()

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.setObjectName("ModalBackdrop")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.card = QFrame(self)
        self.card.setObjectName("ModalCard")
        self.card.setAttribute(Qt.WA_StyledBackground, True)
        self.card_layout = QVBoxLayout(self.card)
        self.card_layout.setContentsMargins(20, 20, 20, 20)
        self.card_layout.setSpacing(10)

        outer = QVBoxLayout(self)
        outer.addStretch()
        row = QHBoxLayout()
        row.addStretch()
        row.addWidget(self.card)
        row.addStretch()
        outer.addLayout(row)
        outer.addStretch()
        self.hide()

    def cover_parent(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.raise_()

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        pos = event.position().toPoint() if hasattr(event, "position") else event.pos()
        if not self.card.geometry().contains(pos):
            self.dismissed.emit()
            event.accept()
            return
        super().mousePressEvent(event)


class AddTaskOverlay(ModalOverlay):
    submitted = Signal()
    cancelled = Signal()

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.card.setMinimumWidth(420)

        title = QLabel("Nouvel événement")
        title.setProperty("class", "panel-title")
        self.description_label = QLabel("")
        self.description_label.setProperty("class", "modal-description")
        self.description_label.setWordWrap(True)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Titre")
        self.title_input.returnPressed.connect(self.submitted.emit)

        self.tag_input = QLineEdit()
        self.tag_input.setPlaceholderText("Tag")

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Description")
        self.description_input.setMaximumHeight(80)

        self.all_day_check = QCheckBox("Toute la journée")

        validator = QRegularExpressionValidator(TIME_PATTERN, self)
        self.start_time_input = QLineEdit()
        self.start_time_input.setPlaceholderText("HH:MM")
        self.start_time_input.setValidator(validator)
        self.end_time_input = QLineEdit()
        self.end_time_input.setPlaceholderText("HH:MM")
        self.end_time_input.setValidator(validator)

        self.time_fields = QWidget()
        time_layout = QGridLayout(self.time_fields)
        time_layout.setContentsMargins(0, 0, 0, 0)
        time_layout.addWidget(QLabel("Début"), 0, 0)
        time_layout.addWidget(QLabel("Fin"), 0, 1)
        time_layout.addWidget(self.start_time_input, 1, 0)
        time_layout.addWidget(self.end_time_input, 1, 1)

        self.location_input = QLineEdit()
        self.location_input.setPlaceholderText("Lieu")

        self.reminder_combo = QComboBox()
        for label, minutes in REMINDER_OPTIONS:
            self.reminder_combo.addItem(label, minutes)

        self.color_group = QButtonGroup(self)
        color_row = QHBoxLayout()
        color_row.setSpacing(6)
        for index, color in enumerate(COLOR_SWATCHES):
            swatch = QRadioButton()
            swatch.setProperty("swatch", color)
            swatch.setStyleSheet(f"QRadioButton::indicator {{ background: {color}; }}")
            self.color_group.addButton(swatch, index)
            color_row.addWidget(swatch)
        color_row.addStretch()

        cancel_button = QPushButton("Annuler")
        cancel_button.setProperty("variant", "ghost")
        cancel_button.clicked.connect(self.cancelled.emit)
        save_button = QPushButton("Ajouter")
        save_button.clicked.connect(self.submitted.emit)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(save_button)

        self.card_layout.addWidget(title)
        self.card_layout.addWidget(self.description_label)
        self.card_layout.addWidget(self.title_input)
        self.card_layout.addWidget(self.tag_input)
        self.card_layout.addWidget(self.description_input)
        self.card_layout.addWidget(self.all_day_check)
        self.card_layout.addWidget(self.time_fields)
        self.card_layout.addWidget(self.location_input)
        self.card_layout.addWidget(QLabel("Rappel"))
        self.card_layout.addWidget(self.reminder_combo)
        self.card_layout.addWidget(QLabel("Couleur"))
        self.card_layout.addLayout(color_row)
        self.card_layout.addLayout(buttons)

    def sync(self, modal: AddTaskModal) -> None:
        if not modal.is_open:
            self.hide()
            return
        self.description_label.setText(modal.description)
        self.time_fields.setVisible(modal.time_fields_visible)
        self.cover_parent()
        self.show()
        if modal.focus_title:
            QTimer.singleShot(0, self.title_input.setFocus)

    def reset(self) -> None:
        self.title_input.clear()
        self.tag_input.clear()
        self.description_input.clear()
        self.all_day_check.setChecked(False)
        self.start_time_input.clear()
        self.end_time_input.clear()
        self.location_input.clear()
        self.reminder_combo.setCurrentIndex(0)
        first = self.color_group.button(0)
        if first is not None:
            first.setChecked(True)

    def read_form(self) -> TaskForm:
        checked = self.color_group.checkedButton()
        return TaskForm(
            title=self.title_input.text(),
            description=self.description_input.toPlainText(),
            tag=self.tag_input.text(),
            all_day=self.all_day_check.isChecked(),
            start_time=_complete_time(self.start_time_input),
            end_time=_complete_time(self.end_time_input),
            location=self.location_input.text(),
            reminder=str(self.reminder_combo.currentData() or 0),
            color=checked.property("swatch") if checked is not None else None,
        )


class DateJumpOverlay(ModalOverlay):
    submitted = Signal()
    cancelled = Signal()

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.card.setMinimumWidth(320)

        title = QLabel("Aller à la date")
        title.setProperty("class", "panel-title")

        self.date_input = QDateEdit()
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat("yyyy-MM-dd")

        cancel_button = QPushButton("Annuler")
        cancel_button.setProperty("variant", "ghost")
        cancel_button.clicked.connect(self.cancelled.emit)
        go_button = QPushButton("Aller")
        go_button.clicked.connect(self.submitted.emit)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(go_button)

        self.card_layout.addWidget(title)
        self.card_layout.addWidget(self.date_input)
        self.card_layout.addLayout(buttons)

    def sync(self, modal: DateJumpModal) -> None:
        if not modal.is_open:
            self.hide()
            return
        target = parse_date_key(modal.value)
        self.date_input.setDate(QDate(target.year, target.month, target.day))
        self.cover_parent()
        self.show()
        QTimer.singleShot(0, self.date_input.setFocus)

    def value(self) -> str:
        return date_key(self.date_input.date().toPython())
