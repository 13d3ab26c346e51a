from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from nobet.exceptions import DuplicateHolidayError, InvalidArgumentError
from nobet.io.bulk_import import load_students
from nobet.io.excel_export import export_to_csv, export_to_xlsx
from nobet.io.store import DEFAULT_DB_PATH, RosterStore
from nobet.io.xls_export import export_schedule, save_document
from nobet.models.dates import format_date, period_label
from nobet.models.validated import ValidatedRosterConfig
from nobet.scheduler.roster import generate_schedule
from nobet.scheduler.stats import calculate_student_stats
from nobet.utils.logging_setup import setup_logging


def _cmd_generate(args: argparse.Namespace, store: RosterStore) -> int:
    cfg = ValidatedRosterConfig(
        class_name=args.class_name or store.load_class_name(),
        year=args.year,
        month=args.month - 1,
        store_path=str(store.db_path),
    )
    if args.class_name:
        store.save_class_name(cfg.class_name)

    students = store.load_students()
    schedule = generate_schedule(cfg.year, cfg.month, students, store.load_holidays())
    label = period_label(cfg.year, cfg.month)

    if args.json_out:
        print(json.dumps([e.to_dict() for e in schedule], ensure_ascii=False, indent=2))
    elif not schedule:
        print("Öğrenci listesi boş, liste oluşturulmadı.")
    else:
        print(f"{cfg.class_name} Nöbet Listesi ({label})")
        for e in schedule:
            if e.is_holiday:
                duty = e.holiday_name
            elif e.is_weekend:
                duty = "Hafta Sonu"
            else:
                duty = f"{e.student1} / {e.student2}"
            print(f" {format_date(e.date)}  {duty}")
        print("Nöbet sayıları:")
        for st in calculate_student_stats(schedule, students):
            print(f" - {st.name}: {st.total}")

    if args.xls_dir:
        path = save_document(export_schedule(schedule, cfg.class_name, label), args.xls_dir)
        print(f"Kaydedildi: {path}")
    if args.xlsx:
        export_to_xlsx(schedule, cfg.class_name, label, args.xlsx)
        print(f"Kaydedildi: {args.xlsx}")
    if args.csv:
        export_to_csv(schedule, args.csv)
        print(f"Kaydedildi: {args.csv}")
    return 0


def _cmd_students(args: argparse.Namespace, store: RosterStore) -> int:
    if args.action == "add":
        for s in store.add_students(args.names):
            print(f"+ {s.name} ({s.id})")
    elif args.action == "import":
        for s in store.add_students(load_students(Path(args.file))):
            print(f"+ {s.name} ({s.id})")
    elif args.action == "remove":
        if not store.remove_student(args.id):
            print(f"Öğrenci bulunamadı: {args.id}", file=sys.stderr)
            return 1
    else:
        for i, s in enumerate(store.load_students(), start=1):
            print(f"{i:>3}. {s.name} ({s.id})")
    return 0


def _cmd_holidays(args: argparse.Namespace, store: RosterStore) -> int:
    if args.action == "add":
        h = store.add_holiday(args.date, args.description or "")
        print(f"+ {h.key} {h.description} ({h.id})")
    elif args.action == "remove":
        if not store.remove_holiday(args.id):
            print(f"Tatil bulunamadı: {args.id}", file=sys.stderr)
            return 1
    elif args.action == "reset":
        print(f"{len(store.reset_holidays())} tatil günü yüklendi")
    else:
        for h in store.load_holidays():
            print(f"{h.key}  {h.description} ({h.id})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="nobet", description="Okul Nöbet Asistanı")
    p.add_argument("--store", default=str(DEFAULT_DB_PATH), help="Veri dosyası (SQLite)")
    p.add_argument("--log-file", default=None, help="Log dosyası")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json-logs", dest="json_logs", action="store_true", help="Logları JSON olarak yaz")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Aylık nöbet listesini oluştur")
    g.add_argument("--year", type=int, required=True, help="Yıl")
    g.add_argument("--month", type=int, required=True, help="Ay (1-12)")
    g.add_argument("--class-name", dest="class_name", default=None, help="Sınıf adı")
    g.add_argument("--xls", dest="xls_dir", default=None, help="Excel (.xls) çıktısı için klasör")
    g.add_argument("--xlsx", default=None, help="xlsx çıktı dosyası")
    g.add_argument("--csv", default=None, help="CSV çıktı dosyası")
    g.add_argument("--json", dest="json_out", action="store_true", help="JSON çıktı")

    s = sub.add_parser("students", help="Öğrenci listesi")
    s_sub = s.add_subparsers(dest="action")
    s_sub.add_parser("list")
    s_add = s_sub.add_parser("add")
    s_add.add_argument("names", nargs="+")
    s_imp = s_sub.add_parser("import")
    s_imp.add_argument("file", help=".txt veya .csv dosyası")
    s_rm = s_sub.add_parser("remove")
    s_rm.add_argument("id")

    h = sub.add_parser("holidays", help="Tatil günleri")
    h_sub = h.add_subparsers(dest="action")
    h_sub.add_parser("list")
    h_add = h_sub.add_parser("add")
    h_add.add_argument("date", help="YYYY-MM-DD")
    h_add.add_argument("description", nargs="?", default="")
    h_rm = h_sub.add_parser("remove")
    h_rm.add_argument("id")
    h_sub.add_parser("reset")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG")
    setup_logging(level=level, log_file=args.log_file, stream=sys.stderr, json_events=args.json_logs)

    store = RosterStore(args.store)
    commands = {
        "generate": _cmd_generate,
        "students": _cmd_students,
        "holidays": _cmd_holidays,
    }
    try:
        return commands[args.command](args, store)
    except (InvalidArgumentError, DuplicateHolidayError, ValidationError, OSError) as e:
        print(f"Hata: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
