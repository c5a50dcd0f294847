"""등록 학부모 목록 CSV 내보내기 서비스입니다."""

import csv
import io
from datetime import date

from app.schemas.feedback import RegisteredParent

PARENTS_CSV_HEADER = "Student ID,Parent Name,Phone Number"


def export_parents_csv(parents: list[RegisteredParent]) -> str:
    output = io.StringIO()
    output.write(PARENTS_CSV_HEADER + "\n")
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for parent in parents:
        writer.writerow([parent.student_id, parent.parent_name, parent.parent_phone])
    return output.getvalue()


def parents_export_filename(today: date | None = None) -> str:
    return f"parents_export_{(today or date.today()).isoformat()}.csv"
