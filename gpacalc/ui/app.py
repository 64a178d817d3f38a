from __future__ import annotations

import logging

import flet as ft

from gpacalc.config.settings import settings
from gpacalc.domain.logic.gpa import GPAValidationError
from gpacalc.domain.logic.grading import GRADE_LETTERS
from gpacalc.state.app_state import AppState
from gpacalc.state.record_list import MAX_COUNT

logger = logging.getLogger(__name__)


class GPACalculatorApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = settings.title
        self.page.scroll = ft.ScrollMode.AUTO
        self.page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.state = AppState()

        self.count_field = ft.TextField(
            label="How many courses do you have?",
            keyboard_type=ft.KeyboardType.NUMBER,
            width=300,
            on_submit=self.handle_count,
        )
        self.count_row = ft.Row(
            [self.count_field, ft.OutlinedButton("Set", on_click=self.handle_count)],
            alignment=ft.MainAxisAlignment.CENTER,
        )
        self.rows = ft.Column(spacing=10)
        self.calculate_button = ft.ElevatedButton(
            "Calculate GPA",
            icon=ft.Icons.CALCULATE,
            on_click=self.handle_calculate,
            width=420,
        )
        self.celebration = ft.Container(
            content=ft.Icon(ft.Icons.CELEBRATION, size=64, color=ft.Colors.AMBER),
            scale=0,
            animate_scale=ft.Animation(600, ft.AnimationCurve.ELASTIC_OUT),
            alignment=ft.alignment.center,
        )
        self.result_dialog = ft.AlertDialog(modal=False, on_dismiss=self.handle_dismiss)

    def run(self) -> None:
        self.page.add(
            ft.Column(
                [
                    ft.Text("GPA Calculator", size=32, weight=ft.FontWeight.BOLD),
                    self.count_row,
                    self.rows,
                    ft.ElevatedButton(
                        "Add Another Course",
                        icon=ft.Icons.ADD,
                        on_click=self.handle_add,
                        width=420,
                    ),
                    self.calculate_button,
                ],
                width=420,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            )
        )
        self.render()

    def render(self) -> None:
        """Rebuild the course rows from state and refresh the gated controls."""
        self.rows.controls = [self._course_row(i, r.units, r.grade) for i, r in enumerate(self.state.records)]
        self.refresh()

    def refresh(self) -> None:
        self.count_row.visible = self.state.show_count_prompt
        self.calculate_button.disabled = not self.state.can_calculate
        self.calculate_button.text = "Calculating..." if self.state.loading else "Calculate GPA"
        self.page.update()

    def _course_row(self, index: int, units: str, grade: str) -> ft.Control:
        units_field = ft.TextField(
            label="Course Units",
            value=units,
            keyboard_type=ft.KeyboardType.NUMBER,
            expand=True,
            on_change=lambda e, i=index: self.handle_edit(i, "units", e.control.value),
        )
        grade_dd = ft.Dropdown(
            label="Grade",
            value=grade or None,
            options=[ft.dropdown.Option(letter) for letter in GRADE_LETTERS],
            expand=True,
            on_change=lambda e, i=index: self.handle_edit(i, "grade", e.control.value),
        )
        return ft.Row(
            [
                units_field,
                grade_dd,
                ft.IconButton(
                    icon=ft.Icons.CLOSE,
                    icon_color=ft.Colors.RED,
                    tooltip="Remove course",
                    on_click=lambda _, i=index: self.handle_remove(i),
                ),
            ]
        )

    def notify(self, message: str) -> None:
        self.page.open(ft.SnackBar(ft.Text(message), bgcolor=ft.Colors.RED_400))

    def handle_count(self, _: ft.ControlEvent) -> None:
        if not self.state.choose_count(self.count_field.value or ""):
            self.notify(f"Enter a whole number of courses from 1 to {MAX_COUNT}.")
            return
        self.render()

    def handle_add(self, _: ft.ControlEvent) -> None:
        self.state.records.append()
        self.render()

    def handle_edit(self, index: int, field: str, value: str | None) -> None:
        # Only the gating controls change; rebuilding rows would steal focus.
        self.state.records.update(index, field, value or "")
        self.refresh()

    def handle_remove(self, index: int) -> None:
        self.state.records.remove(index)
        self.render()

    def handle_calculate(self, _: ft.ControlEvent) -> None:
        try:
            result = self.state.calculate()
        except GPAValidationError as exc:
            self.notify(str(exc))
            self.refresh()
            return

        self.celebration.visible = self.state.should_celebrate
        self.celebration.scale = 0
        self.result_dialog.title = ft.Text("Your GPA is:", text_align=ft.TextAlign.CENTER)
        self.result_dialog.content = ft.Column(
            [
                self.celebration,
                ft.Text(f"{result.gpa:.2f}", size=40, weight=ft.FontWeight.BOLD, color=ft.Colors.GREEN_600),
                ft.Text(result.message, weight=ft.FontWeight.BOLD, text_align=ft.TextAlign.CENTER),
                ft.Text(
                    f"{result.total_points:g} points over {result.total_units:g} units",
                    color=ft.Colors.GREY_600,
                ),
            ],
            tight=True,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )
        self.result_dialog.actions = [ft.TextButton("Close", on_click=self.handle_close)]
        self.refresh()
        self.page.open(self.result_dialog)
        if self.state.should_celebrate:
            self.celebration.scale = 1
            self.page.update()

    def handle_close(self, _: ft.ControlEvent) -> None:
        self.page.close(self.result_dialog)
        self.state.dismiss_result()

    def handle_dismiss(self, _: ft.ControlEvent) -> None:
        self.state.dismiss_result()


def main(page: ft.Page) -> None:
    GPACalculatorApp(page).run()
