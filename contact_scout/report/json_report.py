# contact_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта ContactScout.

Сериализация ExtractionRecord в файл.
"""
import json
from pathlib import Path

from contact_scout.aggregator import ExtractionRecord


def render_json(record: ExtractionRecord, output_path: Path | str) -> Path:
    """
    Сохраняет запись record в формате JSON по указанному пути.

    :param record: итоговая запись по домену
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from contact_scout.report.json_report import render_json
    report_path = render_json(record, 'reports/example.com.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(record.to_dict(), f, ensure_ascii=False, indent=2)

    return output
