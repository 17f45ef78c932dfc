"""Streamlit frontend for the customer measurements form.

Single-page entry point: the "New Customer" form and, after a successful
submit, a summary of the submitted data.
"""

import logging

import streamlit as st

from measurement_form.form import MeasurementForm
from measurement_form.presenter import format_snapshot
from pages.components.measurement_inputs import (
    init_widget_state,
    render_height_input,
    render_identity_inputs,
    render_weight_input,
    reset_inputs,
)
from pages.components.submission_sheet import render_submission_sheet

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="New Customer",
    page_icon="📏",
    layout="centered",
)


logger = logging.getLogger(__name__)


def _show_submission(snapshot):
    logger.debug("%s", format_snapshot(snapshot))
    st.session_state.show_submission = True


# Initialize the form once per session
if 'measurement_form' not in st.session_state:
    form = MeasurementForm()
    form.on_submit(_show_submission)
    st.session_state.measurement_form = form
    st.session_state.show_submission = False

form = st.session_state.measurement_form
init_widget_state(form)

st.title("New Customer")

render_identity_inputs(form)

col1, col2 = st.columns(2)
with col1:
    render_height_input(form)
with col2:
    render_weight_input(form)

st.markdown("---")
col1, col2 = st.columns([3, 1])
with col1:
    # Rejected submits surface through the per-field errors only
    if st.button("Submit", type="primary", disabled=not form.is_valid, use_container_width=True):
        form.submit()
with col2:
    st.button("Clear", on_click=reset_inputs, args=(form,), use_container_width=True)

if st.session_state.show_submission and form.last_snapshot:
    st.markdown("---")
    render_submission_sheet(form.last_snapshot, form.is_valid, form.errors)
    if st.button("Close"):
        st.session_state.show_submission = False
        st.rerun()
