from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .. import config
from ..config import load_layout_preset
from ..errors import CaseRecordError
from ..models import CaseRecord, FontSpec, Officer, Person, Suspect, Victim
from . import fields
from .canvas import PageCanvas, PageDescription
from .dashfill import (
    LabeledRow,
    center_with_symmetric_fill,
    justify_with_trailing_fill,
    row_with_label_and_filled_value,
)
from .dates import clock, day_name, long_date
from .fit import DEFAULT_BANDS, bands_from_preset, clean_text, fit_font_spec
from .metrics import DEFAULT_METRICS, TextMetrics
from .template import load_template
from .wrap import wrap_with_terminator, wrap_words

logger = logging.getLogger(__name__)

CAPTION = "caption"

CRIME_INTRO = ": Dengan maksud untuk mengadukan adanya dugaan tindak pidana :"
INCIDENT_INTRO = "Bahwa telah terjadi adanya dugaan tindak pidana atau peristiwa, sebagai berikut :"
CLOSING_TEXT = (
    "Demikian Surat Tanda Terima Pengaduan ini dibuat dengan sebenarnya "
    "untuk digunakan seperlunya."
)


def _s(layout: dict, key: str, default):
    return layout.get(key, default)


def _require(record: CaseRecord) -> None:
    if record.report_date is None:
        raise CaseRecordError("report_date is required to number and date the STPA")
    if record.reporter is None or not (record.reporter.name or "").strip():
        raise CaseRecordError("reporter.name is required on an STPA")


class DocumentAssembler:
    """
    Lays a case record out on the STPA form.

    The template is read when the assembler is built, so a missing asset
    fails before anything is drawn. ``generate`` keeps no state between
    calls and can run for several records at once.
    """

    def __init__(
        self,
        template_path: Optional[Path] = None,
        layout: Optional[dict] = None,
        metrics: Optional[TextMetrics] = None,
    ) -> None:
        self.template_path = Path(template_path or config.TEMPLATE_PATH)
        load_template(self.template_path)

        self.layout = layout if layout is not None else load_layout_preset()
        self.metrics = metrics or DEFAULT_METRICS
        lay = self.layout

        self.page_size = (float(_s(lay, "page_width", 210)), float(_s(lay, "page_height", 297)))
        self.margin_left = float(_s(lay, "margin_left", 25))
        self.content_width = self.page_size[0] - self.margin_left - float(_s(lay, "margin_right", 20))
        self.label_width = float(_s(lay, "label_width", 45))
        self.colon_width = float(_s(lay, "colon_width", 3))
        self.value_x = self.margin_left + self.label_width + self.colon_width
        self.value_width = self.content_width - self.label_width - self.colon_width

        self.fill = str(_s(lay, "fill_glyph", "-"))
        self.row_slack = float(_s(lay, "row_slack", 10))
        self.wrap_slack = float(_s(lay, "wrap_slack", 20))
        self.fill_gap = float(_s(lay, "fill_gap", 2))
        self.section_gap = float(_s(lay, "section_gap", 1))

        self.body = FontSpec(
            family=str(_s(lay, "font_family", "Helvetica")),
            size=float(_s(lay, "font_size", 11)),
            line_height=float(_s(lay, "line_height", 5)),
        )
        self.bold = replace(self.body, style="B")
        self.title = replace(self.body, style="B", size=float(_s(lay, "title_size", 12)))
        self.small = replace(self.body, size=float(_s(lay, "small_size", 10)))

        preset_bands = _s(lay, "narrative_bands", None)
        self.bands = bands_from_preset(preset_bands) if preset_bands else DEFAULT_BANDS

    # ------------------------------------------------------------------ api

    def generate(self, record: CaseRecord) -> PageDescription:
        canv = PageCanvas(self.page_size)
        try:
            _require(record)
            number = fields.document_number(record)
            self._document_number(canv, number)
            self._opening(canv, record)
            self._reporter(canv, record.reporter)
            self._category(canv, record)
            self._incident(canv, record)
            self._suspects(canv, record.suspects)
            self._victims(canv, record.victims)
            self._narrative(canv, record.narrative)
            self._closing(canv)
            self._signatures(canv, record.reporter, record.officer)
        except Exception:
            logger.exception("STPA generation failed for %s", record.report_number or "draft record")
            raise

        logger.info("Assembled STPA %s with %d fields", number, len(canv.fields))
        return canv.finish(template_path=self.template_path, document_number=number)

    # -------------------------------------------------------------- helpers

    def _row(self, canv: PageCanvas, label: str, value: Optional[str], terminator: str = ";") -> None:
        row = self._value_row(label, (value or "").strip(), terminator)
        self._caption(canv, label)
        self._draw_row(canv, row)

    def _value_row(self, label: str, value: Optional[str], terminator: str = ";") -> LabeledRow:
        return row_with_label_and_filled_value(
            label,
            value,
            terminator,
            self.value_width,
            self.body,
            metrics=self.metrics,
            fill=self.fill,
            slack=self.row_slack,
            wrap_slack=self.wrap_slack,
            gap=self.fill_gap,
        )

    def _caption(self, canv: PageCanvas, label: str) -> None:
        canv.draw(CAPTION, label, self.margin_left, self.label_width, self.body)
        canv.draw(CAPTION, ":", self.margin_left + self.label_width, self.colon_width, self.body)

    def _draw_row(self, canv: PageCanvas, row: LabeledRow, font: Optional[FontSpec] = None) -> None:
        canv.draw_lines(row.label, row.lines, self.value_x, self.value_width, font or self.body, terminator=row.terminator)

    def _paragraph(self, canv: PageCanvas, label: str, text: str, prefix: str = "") -> None:
        """Full-width paragraph whose last line runs out to the margin in filler."""
        lines = wrap_words(prefix + text, self.content_width, self.body, metrics=self.metrics)
        lines[-1] = justify_with_trailing_fill("", lines[-1], self.content_width, self.body, self.metrics, self.fill)
        canv.draw_lines(label, lines, self.margin_left, self.content_width, self.body)

    def _centered(self, canv: PageCanvas, label: str, text: str, font: FontSpec) -> None:
        line = center_with_symmetric_fill(
            text,
            self.content_width,
            font,
            metrics=self.metrics,
            fill=self.fill,
            padding=float(_s(self.layout, "center_padding", 4)),
        )
        canv.draw(label, line, self.margin_left, self.content_width, font, align="C")
        canv.advance(font.line_height)

    def _prefix(self) -> str:
        count = int(_s(self.layout, "opening_prefix_dashes", 5))
        return self.fill * count + " " if count > 0 else ""

    # ------------------------------------------------------------- sections

    def _document_number(self, canv: PageCanvas, number: str) -> None:
        canv.draw(
            "Nomor",
            f"Nomor : {number}",
            self.margin_left,
            self.content_width,
            self.body,
            y=float(_s(self.layout, "y_number", 41.5)),
            align="C",
        )
        canv.move_to(float(_s(self.layout, "y_opening", 49)))

    def _opening(self, canv: PageCanvas, record: CaseRecord) -> None:
        when = record.report_date
        text = (
            f"Pada hari ini {day_name(when)} tanggal {long_date(when)}, "
            f"sekitar pukul {clock(when)} WIB, telah datang {fields.gender_phrase(record.reporter)} "
            f"di {config.OFFICE_NAME}, dengan identitas sebagai berikut :"
        )
        self._paragraph(canv, "Pembuka", text, prefix=self._prefix())
        canv.advance(self.section_gap)

    def _reporter(self, canv: PageCanvas, person: Person) -> None:
        self._row(canv, "Nama", person.name)
        self._row(canv, "Tempat / tanggal lahir", fields.format_birth(person))
        self._row(canv, "Pekerjaan", person.occupation)
        self._row(canv, "Alamat (KTP)", fields.format_address(person.ktp_address))
        self._row(canv, "Alamat Domisili", fields.domicile_or_ktp(person))
        self._row(canv, "NIK", person.nik)
        self._row(canv, "Nomor HP", person.phone, terminator=".")
        canv.advance(self.section_gap)

    def _category(self, canv: PageCanvas, record: CaseRecord) -> None:
        self._centered(canv, "Maksud", CRIME_INTRO, self.body)
        canv.advance(self.section_gap)
        self._centered(canv, "Jenis Pengaduan", fields.category_title(record), self.title)
        canv.advance(self.section_gap * 2)

    def _incident(self, canv: PageCanvas, record: CaseRecord) -> None:
        self._paragraph(canv, "Peristiwa", INCIDENT_INTRO)
        self._row(canv, "Tempat Kejadian", fields.format_incident_location(record))
        self._row(canv, "Waktu Kejadian", fields.format_incident_time(record.incident_time))
        self._row(canv, "Kerugian", fields.format_loss(record.victims))

    def _suspects(self, canv: PageCanvas, suspects: List[Suspect]) -> None:
        rows: List[LabeledRow] = []
        for index, suspect in enumerate(suspects):
            name_line = fields.suspect_name_line(suspect, index, len(suspects))
            if name_line:
                rows.append(self._value_row("Teradu", name_line))
            for identity in suspect.identities:
                rows.append(self._value_row(fields.identity_label(identity), fields.format_identity(identity)))
            if suspect.notes:
                rows.append(self._value_row("Catatan", fields.format_suspect_notes(suspect.notes)))

        if not rows:
            rows.append(self._value_row("Teradu", fields.NO_SUSPECTS))

        self._caption(canv, "Teradu")
        for row in rows:
            self._draw_row(canv, row)

    def _victims(self, canv: PageCanvas, victims: List[Victim]) -> None:
        self._row(canv, "Korban", fields.format_victims(victims))

    def _narrative(self, canv: PageCanvas, narrative: Optional[str]) -> None:
        # the closing full stop is added as the row terminator
        text = clean_text(narrative or "").rstrip(".;").strip() or fields.PLACEHOLDER
        footer_y = float(_s(self.layout, "footer_y", 238))
        available = (
            footer_y
            - float(_s(self.layout, "footer_gap", 10))
            - float(_s(self.layout, "closing_reserve", 12))
            - canv.y
        )
        fit = fit_font_spec(text, available, self.value_width, self.body, metrics=self.metrics, bands=self.bands)
        if fit.overflow:
            canv.warn(
                f"Modus needs about {fit.estimated_height:.1f}mm at {fit.font.size:g}pt "
                f"but only {available:.1f}mm is free; the page overflows"
            )

        lines = wrap_with_terminator(
            text,
            self.value_width,
            ".",
            fit.font,
            metrics=self.metrics,
            fill=self.fill,
            slack=self.wrap_slack,
            gap=self.fill_gap,
        )
        self._caption(canv, "Modus")
        self._draw_row(canv, LabeledRow("Modus", lines, "."), font=fit.font)
        canv.advance(self.section_gap * 2)

    def _closing(self, canv: PageCanvas) -> None:
        self._paragraph(canv, "Penutup", CLOSING_TEXT, prefix=self._prefix())

    def _signatures(self, canv: PageCanvas, reporter: Person, officer: Optional[Officer]) -> None:
        sig = _s(self.layout, "signature", {})
        y = float(_s(self.layout, "footer_y", 238))
        left_x = float(_s(sig, "left_x", 25))
        left_w = float(_s(sig, "left_width", 70))
        right_x = float(_s(sig, "right_x", 115))
        right_w = float(_s(sig, "right_width", 75))
        title_y = y + float(_s(sig, "title_offset", 5))
        name_y = y + float(_s(sig, "name_offset", 25))
        rank_y = y + float(_s(sig, "rank_offset", 31))

        officer = officer or Officer()
        reporter_name = fields.or_dash(reporter.name).upper()
        officer_name = fields.or_dash(officer.name).upper()
        rank_line = f"{(officer.rank or '').strip()} NRP. {fields.or_dash(officer.nrp)}".strip()

        canv.draw("Yang Menerima", "Yang Menerima", right_x, right_w, self.body, y=y, align="C")
        canv.draw("Pengadu", "Pengadu", left_x, left_w, self.body, y=title_y, align="C")
        canv.draw("Penerima", config.RECEIVER_TITLE, right_x, right_w, self.body, y=title_y, align="C")
        canv.draw("Nama Pengadu", reporter_name, left_x, left_w, self.bold, y=name_y, align="C")
        canv.draw("Nama Penerima", officer_name, right_x, right_w, self.bold, y=name_y, align="C", underline=True)
        canv.draw("Pangkat NRP", rank_line, right_x, right_w, self.small, y=rank_y, align="C")
        canv.move_to(rank_y + self.small.line_height)
