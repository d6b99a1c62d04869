from pathlib import Path
from openpyxl import Workbook
from openpyxl.chart import LineChart, Reference
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from core.services.curve_s import CurveSResult, interpret_evm

MONEY_FORMAT = "#,##0.00"
RATIO_FORMAT = "0.000"


class CurveSExcelRenderer:
    def render(self, result: CurveSResult, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        # ---------------- Summary ----------------
        ws = wb.active
        ws.title = "Summary"

        ws["A1"] = f"Curve S - {result.project.code} {result.project.name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value, number_format=None):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = "N/A" if value is None else value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            if number_format and value is not None:
                ws[f"B{row}"].number_format = number_format
            row += 1

        evm = result.evm
        kv("Project ID", result.project.id)
        kv("Schedule ID", result.schedule_id or "-")
        kv("Baseline schedule", "Yes" if result.has_baseline else "No")
        kv("Weeks", len(result.weeks))

        row += 1
        kv("BAC", result.bac, MONEY_FORMAT)
        kv("PV (planned to date)", evm.pv_total, MONEY_FORMAT)
        kv("EV (billed to date)", evm.ev_total, MONEY_FORMAT)
        kv("SV", evm.sv, MONEY_FORMAT)
        kv("SPI", evm.spi, RATIO_FORMAT)
        kv("CV", evm.cv, MONEY_FORMAT)
        kv("CPI", evm.cpi, RATIO_FORMAT)

        row += 1
        kv("Status", interpret_evm(evm))
        for note in result.notes:
            kv("Note", note)

        ws.column_dimensions["A"].width = 26
        ws.column_dimensions["B"].width = 60

        # ---------------- Curve S ----------------
        ws_curve = wb.create_sheet("Curve S")
        headers = ["Week", "Start", "End", "PV", "EV", "PV cumulative", "EV cumulative"]
        for col_index, h in enumerate(headers, start=1):
            cell = ws_curve.cell(row=1, column=col_index, value=h)
            cell.font = header_font
            cell.alignment = center
            cell.fill = header_fill
            cell.border = thin_border

        for row_index, week in enumerate(result.weeks, start=2):
            values = [
                week.label,
                week.week_start,
                week.week_end,
                week.pv,
                week.ev,
                week.pv_cumulative,
                week.ev_cumulative,
            ]
            for col_index, value in enumerate(values, start=1):
                cell = ws_curve.cell(row=row_index, column=col_index, value=value)
                cell.border = thin_border
                if col_index in (2, 3):
                    cell.number_format = "yyyy-mm-dd"
                elif col_index >= 4:
                    cell.number_format = MONEY_FORMAT

        ws_curve.column_dimensions["A"].width = 14
        for col_letter in ("B", "C"):
            ws_curve.column_dimensions[col_letter].width = 12
        for col_letter in ("D", "E", "F", "G"):
            ws_curve.column_dimensions[col_letter].width = 16

        if result.weeks:
            chart = LineChart()
            chart.title = "Curve S"
            chart.y_axis.title = "Amount"
            chart.x_axis.title = "Week"
            last_row = len(result.weeks) + 1
            data = Reference(ws_curve, min_col=6, max_col=7, min_row=1, max_row=last_row)
            labels = Reference(ws_curve, min_col=1, min_row=2, max_row=last_row)
            chart.add_data(data, titles_from_data=True)
            chart.set_categories(labels)
            ws_curve.add_chart(chart, "I2")

        wb.save(output_path)
        return output_path
