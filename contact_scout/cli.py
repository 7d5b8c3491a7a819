#!/usr/bin/env python3
"""
Точка входа для запуска ContactScout через командную строку.

Использование:
  contact_scout EMAIL [опции]

Домен берётся из EMAIL (часть после @), затем перебираются стартовые URL
сайта и собираются email, телефоны, адреса и отрасли.

Опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --limit INT         Макс. число страниц на домен (override max_pages)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --scan-timeout SEC  Таймаут всего сбора (секунд)
  --version, -v       Показать версию ContactScout

Пример:
  contact_scout info@example.co.uk --pretty --json reports/example.json
"""
import asyncio
import sys
from pathlib import Path

import click

from contact_scout import __version__
from contact_scout.config import load_config
from contact_scout.crawler.errors import NoSiteFoundError
from contact_scout.logger import configure
from contact_scout.report.html_report import render_html
from contact_scout.report.json_report import render_json
from contact_scout.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='ContactScout, version %(version)s')
@click.argument('email')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число страниц на домен (override max_pages)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (встроенный, если не указана)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Таймаут всего сбора (секунд)'
)
def cli(email, config_path, limit, log_level, log_file, log_format,
        json_output, html_output, template_dir, pretty, scan_timeout):
    """Собрать контакты с сайта домена из EMAIL."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})

    try:
        if scan_timeout:
            record = asyncio.run(
                asyncio.wait_for(start_scan(email, cfg), timeout=scan_timeout)
            )
        else:
            record = asyncio.run(start_scan(email, cfg))
    except asyncio.TimeoutError:
        print_error(f'Сбор не завершён за {scan_timeout} секунд')
    except NoSiteFoundError as e:
        print_error(str(e))
    except Exception as e:
        print_error(f'Ошибка при сборе: {e}')

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        click.echo(record.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(record, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(record, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


if __name__ == "__main__":
    cli()
