"""
Schedule View
=============
Generated roster as a table plus per-student duty counts.
"""
import pandas as pd
import streamlit as st

from app.state.session import SessionStateManager
from nobet.models.dates import day_name, format_date, period_label
from nobet.models.rules import RULES
from nobet.scheduler.stats import calculate_student_stats


def _schedule_frame(state: SessionStateManager):
    rows, kinds = [], []
    for e in state.schedule:
        if e.is_holiday:
            duty = e.holiday_name or RULES.default_holiday_label
            s1, s2 = duty, ""
        elif e.is_weekend:
            s1, s2 = RULES.weekend_label, ""
        else:
            s1, s2 = e.student1, e.student2
        rows.append({
            "Tarih": format_date(e.date),
            "Gün": day_name(e.date),
            "1. Nöbetçi": s1,
            "2. Nöbetçi": s2,
        })
        kinds.append(e.kind)
    return pd.DataFrame(rows), kinds


def _row_style(kind: str, width: int):
    if kind == "duty":
        return [""] * width
    return ["background-color: #F3F4F6; color: #9CA3AF; font-style: italic"] * width


def render_schedule(state: SessionStateManager):
    """Render the roster table."""
    if not state.schedule:
        st.info("📅 Liste Oluşturulmadı. Sol menüden sınıfınızı ve öğrencilerinizi seçip listeyi oluşturun.")
        return

    st.header(f"{state.class_name} Nöbet Listesi")
    st.caption(f"{period_label(state.year, state.month)} dönemi için oluşturuldu")

    df, kinds = _schedule_frame(state)
    styled = df.style.apply(lambda row: _row_style(kinds[row.name], len(row)), axis=1)
    st.dataframe(styled, hide_index=True, width="stretch")

    with st.expander("📊 Nöbet sayıları"):
        stats = calculate_student_stats(state.schedule, state.students)
        st.dataframe(
            pd.DataFrame([
                {"Öğrenci": s.name, "1. Nöbetçi": s.first_slot, "2. Nöbetçi": s.second_slot, "Toplam": s.total}
                for s in stats
            ]),
            hide_index=True,
        )
