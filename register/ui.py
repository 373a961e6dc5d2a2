# register/ui.py
import logging

import streamlit as st
from gspread.exceptions import APIError

from .config import (
    PAGE_TITLE, STORAGE_FILE, REMOTE_FILE_NAME, REMOTE_MIME_TYPE,
    COL_NAME, COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE,
    MSG_IMPORT_OK
)
from .exceptions import DateRangeError, CSVImportError, RemoteAuthError, RemoteFileNotFoundError
from .remote import DriveBackup
from .storage import JsonFileBackend
from .store import AttendanceStore
from .styles import get_print_css_cached
from .tables import roster_frame, generate_register_html
from .utils import to_date_string, format_percentage

logger = logging.getLogger(__name__)


# --- [1. 세션 상태] ---
def get_store() -> AttendanceStore:
    if "store" not in st.session_state:
        st.session_state["store"] = AttendanceStore(JsonFileBackend(STORAGE_FILE)).load()
    return st.session_state["store"]


def get_drive() -> DriveBackup:
    if "drive" not in st.session_state:
        st.session_state["drive"] = DriveBackup()
    return st.session_state["drive"]


def set_status(message: str):
    st.session_state["status"] = message


# --- [2. 이벤트 핸들러] ---
# 행 위젯 콜백은 그려질 때의 store.generation 을 받는다.
# 같은 rerun 안에서 앞선 콜백이 행 순서를 바꿨으면 행 번호가 다른 학생을 가리키므로 버린다.
def on_add_student():
    get_store().add_student()


def on_name_committed(gen: int, index: int, key: str):
    store = get_store()
    if not store.is_current(gen):
        logger.info("Dropped stale name edit for row %d", index)
        return
    store.set_name(index, st.session_state.get(key, ""))
    store.commit_name_edit()


def on_toggle(gen: int, index: int, day_index: int):
    store = get_store()
    if not store.is_current(gen):
        logger.info("Dropped stale toggle for row %d", index)
        return
    store.toggle_attendance(index, day_index)


def on_delete(gen: int, index: int):
    store = get_store()
    if not store.is_current(gen):
        logger.info("Dropped stale delete for row %d", index)
        return
    store.delete_student(index)


def on_csv_selected(key: str):
    uploaded = st.session_state.get(key)
    if uploaded is None:
        return
    try:
        count = get_store().import_csv(uploaded.getvalue())
        set_status(MSG_IMPORT_OK)
        logger.info("Imported %d students from %s", count, uploaded.name)
    except CSVImportError as e:
        logger.info("CSV import of %s failed: %s", uploaded.name, e.message)
        set_status(e.message)


def sign_in():
    try:
        info = dict(st.secrets["SERVICE_ACCOUNT_INFO"])
        st.session_state["drive"] = DriveBackup.from_service_account_info(info)
    except (KeyError, FileNotFoundError, ValueError) as e:
        logger.exception("Google sign-in failed")
        st.error(f"Google sign-in failed: {e}")


def save_to_remote(store: AttendanceStore):
    try:
        with st.spinner("Saving to Google Drive..."):
            get_drive().upload(store.export_csv().encode("utf-8"))
        set_status(f"Saved {REMOTE_FILE_NAME} to Google Drive.")
    except RemoteAuthError as e:
        logger.warning("Save to drive skipped: %s", e.message)
    except APIError as e:
        logger.exception("Save to drive failed")
        st.error(f"Save to Google Drive failed: {e}")


def load_from_remote(store: AttendanceStore):
    # 도착한 결과가 그 사이의 로컬 편집을 덮어쓴다 (병합 없음)
    try:
        with st.spinner("Loading from Google Drive..."):
            data = get_drive().download()
        store.import_csv(data)
        set_status(MSG_IMPORT_OK)
    except RemoteAuthError as e:
        logger.warning("Load from drive skipped: %s", e.message)
    except (RemoteFileNotFoundError, CSVImportError) as e:
        set_status(e.message)
    except APIError as e:
        logger.exception("Load from drive failed")
        st.error(f"Load from Google Drive failed: {e}")


# --- [3. 화면] ---
def render_sidebar(store: AttendanceStore):
    with st.sidebar:
        orientation = st.radio("Print orientation", ["landscape", "portrait"])
        st.markdown(get_print_css_cached(orientation), unsafe_allow_html=True)

        st.subheader("Google Drive")
        # 사용자 OAuth가 아니라 secrets의 서비스 계정으로 로그인 -> 파일은 서비스 계정 Drive에 저장
        drive = get_drive()
        st.caption(drive.storage_note())
        if drive.is_authenticated():
            st.caption("Signed in")
            if st.button("Sign out"):
                drive.sign_out()
                st.rerun()
        else:
            st.caption("Signed out")
            if st.button("Sign in"):
                sign_in()
                st.rerun()

        if st.button("Save to Google Drive"):
            save_to_remote(store)
        if st.button("Load from Google Drive"):
            load_from_remote(store)
            st.rerun()


def render_range(store: AttendanceStore):
    c1, c2, c3 = st.columns([2, 1, 2])
    with c1:
        start = st.date_input("Start date", value=store.start, key="start_date")
    with c2:
        st.markdown("<div style='text-align:center; padding-top:30px;'>to</div>", unsafe_allow_html=True)
    with c3:
        end = st.date_input("End date", value=store.end, key="end_date")

    try:
        store.set_range(start, end)
    except DateRangeError as e:
        st.error(e.message)


def render_roster(store: AttendanceStore):
    days = store.days
    gen = store.generation
    widths = [3] + [1] * len(days) + [1, 1, 1, 1, 1]

    header = st.columns(widths)
    labels = [COL_NAME] + [to_date_string(d) for d in days] + [
        COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE, "Actions"
    ]
    for col, label in zip(header, labels):
        col.markdown(f"**{label}**")

    for i, record in enumerate(store.roster):
        cols = st.columns(widths)
        name_key = f"name_{gen}_{i}"
        cols[0].text_input(
            "Name",
            value=record.name,
            key=name_key,
            placeholder="New student name" if i == store.new_index else "",
            label_visibility="collapsed",
            on_change=on_name_committed,
            args=(gen, i, name_key),
        )

        for d in range(len(days)):
            cols[d + 1].checkbox(
                f"{record.name} {to_date_string(days[d])}",
                value=d < len(record.attendance) and record.attendance[d],
                key=f"att_{gen}_{i}_{d}",
                label_visibility="collapsed",
                on_change=on_toggle,
                args=(gen, i, d),
            )

        t = store.totals(i)
        base = len(days) + 1
        cols[base].write(t.total_days)
        cols[base + 1].write(t.present)
        cols[base + 2].write(t.absent)
        cols[base + 3].write(f"{format_percentage(t.percentage)}%")
        cols[base + 4].button("Delete", key=f"del_{gen}_{i}", on_click=on_delete, args=(gen, i))


def run_app():
    store = get_store()

    render_sidebar(store)

    st.markdown(f"<h1 style='text-align:center; color:#2563eb;'>{PAGE_TITLE}</h1>", unsafe_allow_html=True)

    render_range(store)
    render_roster(store)

    status = st.session_state.get("status")
    if status:
        st.markdown(f"<div class='status-msg'>{status}</div>", unsafe_allow_html=True)

    c1, c2, c3 = st.columns([2, 3, 1])
    with c1:
        st.button("Add Student", on_click=on_add_student)
    with c2:
        upload_key = f"csv_upload_{store.generation}"
        st.file_uploader("Import CSV", type=["csv"], key=upload_key,
                         on_change=on_csv_selected, args=(upload_key,))
    with c3:
        st.download_button(
            "Export to CSV",
            data=store.export_csv(),
            file_name=REMOTE_FILE_NAME,
            mime=REMOTE_MIME_TYPE,
        )

    with st.expander("Summary", expanded=False):
        st.dataframe(roster_frame(store.roster, store.days), hide_index=True)

    title = f"{PAGE_TITLE} ({store.start.isoformat()} ~ {store.end.isoformat()})"
    st.markdown(
        f"<div class='print-only'>{generate_register_html(store.roster, store.days, title)}</div>",
        unsafe_allow_html=True,
    )
