import html

import streamlit as st
from dotenv import load_dotenv

from jobboard.config import load_settings
from jobboard.engine import search_engine
from jobboard.engine.pagination import paginate
from jobboard.utils.helpers import safe_url

# =========================================================
# 1. PAGE CONFIG & STYLES
# =========================================================
st.set_page_config(page_title="Remote Job Board", layout="wide")

st.markdown("""
<style>
    .stApp { background: linear-gradient(135deg, #f5f3ff 0%, #fdf2f8 50%, #fff7ed 100%); }
    .job-card {
        background: rgba(255,255,255,0.9);
        border-radius: 18px;
        padding: 20px;
        box-shadow: 0 10px 25px rgba(0,0,0,0.05);
        margin-bottom: 20px;
        border: 1px solid #eee;
    }
    .job-title { font-size: 19px; font-weight: 700; color: #1F2937; margin-bottom: 4px; }
    .job-company { font-size: 15px; color: #4B5563; font-weight: 500; }
    .job-location { font-size: 13px; color: #6B7280; margin-top: 8px; }
    .apply-btn {
        background: linear-gradient(135deg, #6A5AE0, #B983FF);
        color: white !important;
        padding: 8px 20px;
        border-radius: 10px;
        text-decoration: none;
        font-weight: 600;
        display: inline-block;
        margin-top: 15px;
    }
</style>
""", unsafe_allow_html=True)

# =========================================================
# 2. DATA
# =========================================================
load_dotenv()
settings = load_settings()
jobs = search_engine.get_jobs(settings)

if "page" not in st.session_state:
    st.session_state.page = 1


def _move(step):
    st.session_state.page += step


# =========================================================
# 3. UI LAYOUT
# =========================================================
st.title("Remote Job Board")
st.markdown("---")

result = paginate(jobs, st.session_state.page, settings.page_size)

if not jobs:
    st.warning("No jobs could be loaded. Check the configured sources and try again later.")

for job in result.items:
    url = safe_url(job.get("url"))
    apply_link = f'<a href="{html.escape(url)}" target="_blank" class="apply-btn">Apply Now</a>' if url else ""
    st.markdown(f"""
    <div class="job-card">
        <div class="job-title">{html.escape(job['title'])}</div>
        <div class="job-company">{html.escape(job.get('company') or '')}</div>
        <div class="job-location">{html.escape(job.get('location') or 'Remote')} · {html.escape(job['source'])}</div>
        {apply_link}
    </div>
    """, unsafe_allow_html=True)

prev_col, info_col, next_col = st.columns(3)
with prev_col:
    if result.has_prev:
        st.button("Previous", key="prev", on_click=_move, args=(-1,))
with info_col:
    st.caption(f"Page {result.page} of {result.page_count}")
with next_col:
    if result.has_next:
        st.button("Next", key="next", on_click=_move, args=(1,))
