"""Submitted data summary for Streamlit pages."""

import pandas as pd
import streamlit as st
from measurement_form.models import FormSnapshot
from measurement_form.presenter import format_form_state, snapshot_rows


def render_submission_sheet(snapshot: FormSnapshot, is_valid: bool, errors: dict):
    """Render a read-only summary of a snapshot plus the current form state.

    Args:
        snapshot: Snapshot taken at the last accepted submit
        is_valid: Current aggregate validity of the form
        errors: Current per-field errors, keyed by field name
    """
    st.markdown("### Submitted Form Data")
    df = pd.DataFrame(snapshot_rows(snapshot), columns=["Field", "Value"])
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Field": st.column_config.TextColumn("Field", width="small"),
            "Value": st.column_config.TextColumn("Value", width="large"),
        }
    )

    st.text(format_form_state(is_valid, errors))
