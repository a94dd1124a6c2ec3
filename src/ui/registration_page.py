"""Public registration form UI."""
import logging
import time
from typing import Optional

import streamlit as st

from src.services.api_client import RegistrationApiClient
from src.services.intake_form import (
    FAILED,
    SUCCESS,
    SUCCESS_RESET_SECONDS,
    IntakeFormController,
)
from src.ui.html_utils import TYPE_BADGES, field_feedback_html, html_block, type_badge_html

logger = logging.getLogger(__name__)

FORM_STATE_KEY = "registration_form"
FORM_GENERATION_KEY = "registration_form_generation"

FIELD_LABELS = {
    "name": ("Full name*", "Jane Doe"),
    "email": ("Email*", "jane@example.com"),
    "company": ("Company*", "Acme Corp"),
    "phone": ("Phone", "+1 (555) 010-0000"),
}


def _get_controller() -> IntakeFormController:
    """Return the form controller stored in session state, creating it on first use."""
    if FORM_STATE_KEY not in st.session_state:
        st.session_state[FORM_STATE_KEY] = IntakeFormController()
    if FORM_GENERATION_KEY not in st.session_state:
        st.session_state[FORM_GENERATION_KEY] = 0
    return st.session_state[FORM_STATE_KEY]


def _widget_key(field_name: str) -> str:
    """Widget key; bumping the generation gives the form fresh, empty inputs."""
    return f"registration_{field_name}_{st.session_state[FORM_GENERATION_KEY]}"


def _new_form_generation() -> None:
    st.session_state[FORM_GENERATION_KEY] = st.session_state.get(FORM_GENERATION_KEY, 0) + 1


def _on_field_change(field_name: str) -> None:
    """Per-field validation on every edit."""
    controller = _get_controller()
    controller.edit_field(field_name, st.session_state.get(_widget_key(field_name), ""))


def visible_fields(registration_type: Optional[str]) -> list:
    """Fields shown for the selected type; company only for professionals."""
    fields = ["name", "email"]
    if registration_type == "professional":
        fields.append("company")
    fields.append("phone")
    return fields


def _render_type_selector(controller: IntakeFormController) -> None:
    st.markdown("#### I am registering as a")
    cols = st.columns(2, gap="small")
    for col, registration_type in zip(cols, ("student", "professional")):
        badge = TYPE_BADGES[registration_type]
        with col:
            selected = controller.registration_type == registration_type
            if st.button(
                f"{badge['icon']} {badge['label']}",
                key=f"registration_type_{registration_type}",
                type="primary" if selected else "secondary",
                use_container_width=True,
                disabled=not controller.can_submit,
            ):
                controller.select_type(registration_type)
                st.rerun()


def _render_field(controller: IntakeFormController, field_name: str) -> None:
    label, placeholder = FIELD_LABELS[field_name]
    st.text_input(
        label,
        value=controller.values[field_name],
        key=_widget_key(field_name),
        placeholder=placeholder,
        on_change=_on_field_change,
        args=(field_name,),
    )
    status, message = controller.field_feedback(field_name)
    feedback = field_feedback_html(status or "", message)
    if feedback:
        st.markdown(feedback, unsafe_allow_html=True)


def _render_success(controller: IntakeFormController) -> None:
    """Show the confirmation, then return the form to idle."""
    st.success(f"🎉 {controller.message}")
    if controller.registration_type:
        st.markdown(type_badge_html(controller.registration_type), unsafe_allow_html=True)
    st.caption("Thank you! We look forward to seeing you at the conference.")

    remaining = SUCCESS_RESET_SECONDS - (time.monotonic() - (controller.succeeded_at or 0))
    if remaining > 0:
        time.sleep(remaining)

    controller.tick()
    _new_form_generation()
    st.rerun()


def render_registration_page(client: Optional[RegistrationApiClient] = None) -> None:
    """Render the public registration form."""
    controller = _get_controller()
    controller.tick()

    st.markdown(
        html_block(
            """
            <div class="page-header">
                <h1>📝 Conference Registration</h1>
                <div class="page-subtitle">Reserve your seat as a student or a professional</div>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    if controller.state == SUCCESS:
        _render_success(controller)
        return

    _render_type_selector(controller)

    if controller.registration_type is None:
        st.info("Choose a registration type to continue.")
        return

    for field_name in visible_fields(controller.registration_type):
        _render_field(controller, field_name)

    if controller.message and controller.state != SUCCESS:
        if controller.state == FAILED:
            st.error(f"❌ {controller.message}")
        else:
            st.warning(controller.message)

    if st.button(
        "Complete registration",
        key="registration_submit",
        type="primary",
        use_container_width=True,
        disabled=not controller.can_submit,
    ):
        client = client or RegistrationApiClient()
        with st.spinner("Submitting..."):
            accepted = controller.submit(client)
        if accepted:
            logger.info("Registration form submitted successfully")
        st.rerun()
