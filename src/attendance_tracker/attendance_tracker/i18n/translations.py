"""Static translation table and locale date formatting."""

from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_LANGUAGE

TRANSLATIONS = {
    "en": {
        "attendanceReport": "Attendance Report",
        "generatedOn": "Generated on",
        "date": "Date",
        "student": "Student",
        "section": "Section",
        "status": "Status",
        "present": "Present",
        "absent": "Absent",
        "totalStudents": "Total Students",
        "totalPresent": "Total Present",
        "totalAbsent": "Total Absent",
        "attendanceRate": "Attendance Rate",
        "allSections": "All Sections",
        "noAttendance": "No attendance records found",
        "errorRequired": "Please fill in all required fields",
    },
    "pt": {
        "attendanceReport": "Relatório de Presença",
        "generatedOn": "Gerado em",
        "date": "Data",
        "student": "Aluno",
        "section": "Seção",
        "status": "Status",
        "present": "Presente",
        "absent": "Ausente",
        "totalStudents": "Total de Alunos",
        "totalPresent": "Total de Presentes",
        "totalAbsent": "Total de Ausentes",
        "attendanceRate": "Taxa de Presença",
        "allSections": "Todas as Seções",
        "noAttendance": "Nenhum registro de presença encontrado",
        "errorRequired": "Preencha todos os campos obrigatórios",
    },
    "tr": {
        "attendanceReport": "Yoklama Raporu",
        "generatedOn": "Oluşturulma tarihi",
        "date": "Tarih",
        "student": "Öğrenci",
        "section": "Bölüm",
        "status": "Durum",
        "present": "Var",
        "absent": "Yok",
        "totalStudents": "Toplam Öğrenci",
        "totalPresent": "Toplam Var",
        "totalAbsent": "Toplam Yok",
        "attendanceRate": "Katılım Oranı",
        "allSections": "Tüm Bölümler",
        "noAttendance": "Yoklama kaydı bulunamadı",
        "errorRequired": "Lütfen tüm zorunlu alanları doldurun",
    },
}

_DATE_FORMATS = {
    "en": "{d.month}/{d.day}/{d.year}",
    "pt": "{d.day:02d}/{d.month:02d}/{d.year}",
    "tr": "{d.day:02d}.{d.month:02d}.{d.year}",
}


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up ``key``; unknown languages use English, unknown keys echo back."""
    table = TRANSLATIONS.get(language) or TRANSLATIONS[DEFAULT_LANGUAGE]
    return table.get(key, key)


def format_date(value: str, language: str = DEFAULT_LANGUAGE) -> str:
    try:
        d = parse_iso_date(value)
    except (TypeError, ValueError):
        return value
    fmt = _DATE_FORMATS.get(language, _DATE_FORMATS[DEFAULT_LANGUAGE])
    return fmt.format(d=d)
