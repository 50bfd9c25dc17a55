"""
Single-page browser front end for the resume reviewer.

Upload a PDF, paste a job description, and request a review. The page keeps
one ReviewSession per browser tab in st.session_state.

Usage:
    streamlit run scripts/review_app.py
"""

import streamlit as st
from dotenv import load_dotenv

from reviewer.contexts.presentation import render_review
from reviewer.session import ReviewSession
from reviewer.utils.llm import get_provider

load_dotenv()

st.set_page_config(page_title="Resume Reviewer", page_icon="📄", layout="centered")

if "session" not in st.session_state:
    st.session_state.session = ReviewSession()
    st.session_state.file_id = None

session: ReviewSession = st.session_state.session

st.title("Resume Reviewer")

# -----------------------------
# Inputs
# -----------------------------

uploaded = st.file_uploader("Upload your resume (PDF)", type=["pdf"])

# Streamlit reruns the script on every interaction; only extract on a new file
if uploaded is None:
    if st.session_state.file_id is not None:
        session.clear_file()
        st.session_state.file_id = None
elif uploaded.file_id != st.session_state.file_id:
    st.session_state.file_id = uploaded.file_id
    with st.spinner("Extracting text..."):
        session.select_file(uploaded.getvalue())

job_description = st.text_area(
    "Job description", placeholder="Paste Job Description here...", height=160
)
session.set_job_description(job_description)

provider_error = ""
if st.button("Review Resume", type="primary", disabled=not session.can_review):
    try:
        provider = get_provider()
    except (ValueError, ImportError) as e:
        provider_error = str(e)
    else:
        with st.spinner("Reviewing..."):
            session.request_review(provider)

if session.extraction_error:
    st.error(session.extraction_error)
elif session.extraction_note:
    st.warning(session.extraction_note)
if provider_error:
    st.error(provider_error)
if session.review_error:
    st.error(session.review_error)

# -----------------------------
# Result
# -----------------------------

if session.result is not None:
    rendered = render_review(session.result)

    st.subheader("AI Review")
    st.write(rendered.summary)

    for meter in (rendered.rating, rendered.ats):
        st.markdown(f"**{meter.label}:** {meter.display}")
        st.progress(int(meter.percent or 0))

    st.markdown("**Suggestions:**")
    for line in rendered.suggestions:
        st.text(f"• {line}")

    st.markdown("**Spelling Errors:**")
    for line in rendered.spelling_errors:
        st.text(f"• {line}")
