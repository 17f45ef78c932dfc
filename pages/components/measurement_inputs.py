"""Input widgets for the measurements form.

Widgets only forward change events to the MeasurementForm held in session
state and copy the reconciled unit values back into the inputs.
"""

from datetime import date

import streamlit as st
from measurement_form.config import HEIGHT_UNITS, UNIT_LABELS, WEIGHT_UNITS
from measurement_form.form import MeasurementForm

# Earliest date offered by the picker; the value itself has no range check
EARLIEST_BIRTH_DATE = date(1900, 1, 1)

# Widget keys in st.session_state
_TEXT_INPUTS = (
    "full_name", "mobile_number", "email",
    "height_cm", "height_ft", "height_in", "weight_kg", "weight_lbs",
)


def _key(name: str) -> str:
    return f"input_{name}"


def _form_value(form: MeasurementForm, name: str) -> str:
    if name.startswith("height_"):
        return getattr(form.height, "inches" if name == "height_in" else name[len("height_"):])
    if name.startswith("weight_"):
        return getattr(form.weight, name[len("weight_"):])
    return form.field(name).raw_value or ""


def init_widget_state(form: MeasurementForm):
    """Seed widget values from the form before rendering.

    Streamlit drops the state of widgets that were not rendered on the last
    run (e.g. the ft/in inputs while cm is selected), so missing keys are
    refilled from the form on every run.
    """
    for name in _TEXT_INPUTS:
        if _key(name) not in st.session_state:
            st.session_state[_key(name)] = _form_value(form, name)
    if _key("height_unit") not in st.session_state:
        st.session_state[_key("height_unit")] = form.height_unit
    if _key("weight_unit") not in st.session_state:
        st.session_state[_key("weight_unit")] = form.weight_unit


def _sync_unit_inputs(form: MeasurementForm):
    """Copy reconciled height/weight values into their inputs.

    Only called from widget callbacks, which run before widgets render.
    """
    st.session_state[_key("height_cm")] = form.height.cm
    st.session_state[_key("height_ft")] = form.height.ft
    st.session_state[_key("height_in")] = form.height.inches
    st.session_state[_key("weight_kg")] = form.weight.kg
    st.session_state[_key("weight_lbs")] = form.weight.lbs
    st.session_state[_key("height_unit")] = form.height_unit
    st.session_state[_key("weight_unit")] = form.weight_unit


def _on_change(form: MeasurementForm, name: str):
    # Text inputs commit on enter or focus loss, so a change is also a blur
    form.set_field(name, st.session_state[_key(name)])
    form.blur_field(name)
    _sync_unit_inputs(form)


def _on_unit_change(form: MeasurementForm, dimension: str):
    form.set_unit(dimension, st.session_state[_key(f"{dimension}_unit")])
    _sync_unit_inputs(form)


def reset_inputs(form: MeasurementForm):
    """Clear the form and every input (callback for the reset button)."""
    form.reset()
    for name in _TEXT_INPUTS:
        st.session_state[_key(name)] = ""
    st.session_state[_key("date_of_birth")] = None


def _show_error(form: MeasurementForm, name: str):
    error = form.field(name).visible_error
    if error:
        st.error(error)


def _text_input(form: MeasurementForm, name: str, label: str, placeholder: str, **kwargs):
    st.text_input(
        label,
        placeholder=placeholder,
        key=_key(name),
        on_change=_on_change,
        args=(form, name),
        **kwargs,
    )


def render_identity_inputs(form: MeasurementForm):
    """Name, mobile number, email and date of birth."""
    _text_input(form, "full_name", "Full Name", "Full Name")
    _show_error(form, "full_name")

    col1, col2 = st.columns(2)
    with col1:
        _text_input(form, "mobile_number", "Mobile Number", "Mobile Number")
        if form.field("mobile_number").raw_value:
            st.caption(f"{form.mobile_characters_left()} characters left")
        _show_error(form, "mobile_number")
    with col2:
        _text_input(form, "email", "Email Address", "Email Address")
        _show_error(form, "email")

    st.date_input(
        "Date of Birth",
        value=None,
        min_value=EARLIEST_BIRTH_DATE,
        format="DD/MM/YYYY",
        key=_key("date_of_birth"),
        on_change=_on_change,
        args=(form, "date_of_birth"),
    )
    _show_error(form, "date_of_birth")


def render_height_input(form: MeasurementForm):
    """Height in cm, or feet and inches, with the other system shown below."""
    st.markdown("#### Height")
    if form.height_unit == "cm":
        _text_input(form, "height_cm", "Height (cm)", "Height in cm")
        if form.height.ft or form.height.inches:
            st.caption(f"= {form.height.ft} ft {form.height.inches} in")
    else:
        ft_col, in_col = st.columns(2)
        with ft_col:
            _text_input(form, "height_ft", "Feet", "Ft")
        with in_col:
            _text_input(form, "height_in", "Inches", "Inch")
        if form.height.cm:
            st.caption(f"= {form.height.cm} cm")
    _show_error(form, "height")

    st.radio(
        "Height unit",
        HEIGHT_UNITS,
        format_func=UNIT_LABELS.get,
        horizontal=True,
        key=_key("height_unit"),
        on_change=_on_unit_change,
        args=(form, "height"),
    )


def render_weight_input(form: MeasurementForm):
    """Weight in the selected unit, with the other unit shown below."""
    st.markdown("#### Weight")
    unit = form.weight_unit
    _text_input(form, f"weight_{unit}", f"Weight ({unit})", f"Weight in {unit}")
    other = "lbs" if unit == "kg" else "kg"
    derived = getattr(form.weight, other)
    if derived:
        st.caption(f"= {derived} {other}")
    _show_error(form, "weight")

    st.radio(
        "Weight unit",
        WEIGHT_UNITS,
        format_func=UNIT_LABELS.get,
        horizontal=True,
        key=_key("weight_unit"),
        on_change=_on_unit_change,
        args=(form, "weight"),
    )
