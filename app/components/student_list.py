"""Student list editor for Streamlit."""
from typing import List

import streamlit as st

from nobet.exceptions import InvalidArgumentError
from nobet.io.bulk_import import parse_student_names
from nobet.io.store import RosterStore
from nobet.models.student import Student


def render_student_list(students: List[Student], store: RosterStore) -> List[Student]:
    """
    Render the student list with single and bulk add.

    Args:
        students: Current roster, in rotation order
        store: Store the roster is saved to on change

    Returns:
        Updated roster
    """
    st.subheader(f"👥 Öğrenci Listesi ({len(students)})")
    updated = list(students)

    with st.form("student_add", clear_on_submit=True):
        col1, col2 = st.columns([4, 1])
        name = col1.text_input("Öğrenci adı", placeholder="Öğrenci adı yazın...", label_visibility="collapsed")
        if col2.form_submit_button("➕"):
            try:
                updated.append(Student(name=name))
            except InvalidArgumentError:
                pass

    notice = st.session_state.pop("student_notice", None)
    if notice:
        st.success(notice)

    with st.expander("📋 Excel'den / Toplu Ekle"):
        if st.session_state.pop("bulk_clear", False):
            st.session_state["bulk_text"] = ""
        bulk_text = st.text_area(
            "Toplu Ekleme",
            placeholder="Excel'den kopyaladığınız isim listesini buraya yapıştırın...",
            key="bulk_text",
        )
        uploaded = st.file_uploader("Dosya Yükle", type=["csv", "txt"], key="bulk_file")
        if st.button("Listeyi Ekle", key="bulk_add"):
            text = bulk_text
            if uploaded is not None:
                text += "\n" + uploaded.getvalue().decode("utf-8-sig")
            names = parse_student_names(text)
            updated.extend(Student(name=n) for n in names)
            if names:
                # text_area can only be reset before it is drawn on the next run
                st.session_state["bulk_clear"] = True
                st.session_state["student_notice"] = f"✅ {len(names)} öğrenci eklendi"

    if not updated:
        st.caption("Listeniz boş. Öğrenci ekleyin veya Excel'den yapıştırın.")

    for i, s in enumerate(list(updated), start=1):
        col1, col2 = st.columns([5, 1])
        col1.write(f"{i}. {s.name}")
        if col2.button("🗑", key=f"student_rm_{s.id}", help="Sil"):
            updated = [x for x in updated if x.id != s.id]

    if [s.id for s in updated] != [s.id for s in students]:
        store.save_students(updated)
        st.session_state["students"] = updated
        st.rerun()

    return updated
