# register/styles.py
import streamlit as st


def get_print_css(orientation: str = "landscape") -> str:
    page_size = "A4 portrait" if orientation == "portrait" else "A4 landscape"

    return f"""
    <style>
        .report-view {{ border: 1px solid #ccc; padding: 20px; background: white; margin-top: 20px; color: black; }}

        table.register-table {{ width: 100%; border-collapse: collapse; table-layout: auto; margin-bottom: 10px; }}

        .register-table th {{
            border: 1px solid #ccc !important; padding: 6px 4px !important;
            text-align: center !important; vertical-align: middle !important;
            white-space: nowrap !important; font-size: 9pt !important;
            background-color: #3b82f6 !important; color: white !important;
        }}

        .register-table td {{
            border: 1px solid #ccc; padding: 4px; text-align: center;
            vertical-align: middle !important; font-size: 9pt; color: black;
        }}

        .register-table td.name-cell {{
            text-align: left; padding-left: 6px; white-space: nowrap;
            overflow: hidden; text-overflow: ellipsis;
        }}

        /* 짝수 행 음영 */
        .register-table tr.stripe td {{ background-color: #f3f4f6; }}

        .status-msg {{ text-align: center; margin: 12px 0; }}

        @media screen {{
            .print-only {{ display: none !important; }}
        }}

        @media print {{
            header, footer, [data-testid="stSidebar"], [data-testid="stHeader"],
            .stButton, .stDateInput, .stTextInput, .stCheckbox, .stFileUploader,
            .stDownloadButton, [data-testid="stExpander"] {{ display: none !important; }}
            .no-print {{ display: none !important; }}
            .block-container {{ padding: 0 !important; max-width: 100% !important; }}
            .report-view {{ border: none !important; padding: 0 !important; margin: 0 !important; }}

            [data-testid="stDataFrame"] {{ display: none !important; }}
            .print-only {{ display: block !important; }}

            @page {{ size: {page_size}; margin: 8mm 5mm; }}

            .register-table th {{
                background-color: #f0f0f0 !important; color: black !important;
                -webkit-print-color-adjust: exact; print-color-adjust: exact;
            }}
            .register-table th, .register-table td {{ border: 1px solid black !important; font-size: 7.5pt !important; }}
        }}
    </style>
    """


@st.cache_data
def get_print_css_cached(orientation: str) -> str:
    return get_print_css(orientation)
