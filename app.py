import logging

import streamlit as st

from register.config import PAGE_TITLE, LOG_LEVEL
from register.ui import run_app

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("google.auth").setLevel(logging.WARNING)


def main():
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    run_app()


if __name__ == "__main__":
    main()
