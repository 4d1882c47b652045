"""Elite Fitness Assessment — Streamlit intake wizard and plan dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from intake import IntakeError, IntakeWizard, Question, QuestionKind
from plan_engine.engine import PlanEngine
from plan_engine.guidance import (
    COACHING_BENEFITS,
    first_check_in,
    lifestyle_tips,
    nutrition_tips,
    training_guidelines,
)
from plan_engine.serialization import to_plan_json_string

from helpers import (
    ACTIVITY_LABELS,
    GOAL_LABELS,
    MEAL_COLORS,
    format_calories,
    format_date,
    format_grams,
    format_weight,
    format_weight_change,
    goal_summary,
    macro_breakdown_frame,
    meal_schedule_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Elite Fitness Assessment",
    page_icon="💪",
    layout="centered",
)


# ---------------------------------------------------------------------------
# Cached engine and session state
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> PlanEngine:
    return PlanEngine()


def _wizard() -> IntakeWizard:
    if "wizard" not in st.session_state:
        st.session_state["wizard"] = IntakeWizard()
    return st.session_state["wizard"]


def _start_over() -> None:
    _wizard().reset()
    # Widget keys would otherwise repopulate the old answers
    for k in [k for k in st.session_state if k.startswith("q_")]:
        del st.session_state[k]
    for k in ("record", "plan", "intake_error"):
        st.session_state.pop(k, None)


# ---------------------------------------------------------------------------
# Question rendering
# ---------------------------------------------------------------------------


def _choice_index(choices: tuple[str, ...], current) -> int | None:
    return choices.index(current) if current in choices else None


def _render_question(wizard: IntakeWizard, q: Question) -> None:
    """Render the widget(s) for one step and store the answers on the wizard."""
    st.subheader(q.prompt)
    current = wizard.get_answer(q.field)

    if q.kind == QuestionKind.NUMBER:
        col_value, col_unit = st.columns([3, 1]) if q.unit_field else (st.container(), None)
        with col_value:
            value = st.text_input(
                q.prompt, value="" if current is None else str(current),
                placeholder=q.placeholder, key=f"q_{q.field}",
                label_visibility="collapsed",
            )
        wizard.set_answer(q.field, value)
        if q.unit_field and col_unit is not None:
            with col_unit:
                unit = st.radio(
                    "Unit", q.unit_choices,
                    index=_choice_index(q.unit_choices, wizard.get_answer(q.unit_field)) or 0,
                    horizontal=True, key=f"q_{q.unit_field}",
                    label_visibility="collapsed",
                )
            wizard.set_answer(q.unit_field, unit)

    elif q.kind == QuestionKind.CHOICE and len(q.choices) > 5:
        value = st.selectbox(
            q.prompt, q.choices, index=_choice_index(q.choices, current),
            placeholder="Select an option", key=f"q_{q.field}",
            label_visibility="collapsed",
        )
        wizard.set_answer(q.field, value)

    elif q.kind == QuestionKind.CHOICE:
        value = st.radio(
            q.prompt, q.choices, index=_choice_index(q.choices, current),
            key=f"q_{q.field}", label_visibility="collapsed",
        )
        wizard.set_answer(q.field, value)

    elif q.kind == QuestionKind.MULTI_CHOICE:
        selected = set(current or ())
        cols = st.columns(2)
        for i, option in enumerate(q.choices):
            with cols[i % 2]:
                if st.checkbox(option, value=option in selected, key=f"q_{q.field}_{i}"):
                    selected.add(option)
                else:
                    selected.discard(option)
        wizard.set_answer(q.field, [o for o in q.choices if o in selected])

    elif q.kind == QuestionKind.DATE_OR_TEXT:
        picked = st.date_input(
            "Pick a date", value=current, min_value=date.today(), key=f"q_{q.field}",
        )
        wizard.set_answer(q.field, picked)
        timeframe = st.text_input(
            "Or describe a timeframe",
            value=wizard.get_answer(q.companion_field) or "",
            placeholder=q.placeholder, key=f"q_{q.companion_field}",
        )
        wizard.set_answer(q.companion_field, timeframe)

    elif q.kind == QuestionKind.TEXT:
        value = st.text_area(
            q.prompt, value=current or "", placeholder=q.placeholder,
            key=f"q_{q.field}", label_visibility="collapsed",
        )
        wizard.set_answer(q.field, value)

    elif q.kind == QuestionKind.EMAIL:
        value = st.text_input(
            q.prompt, value=current or "", placeholder=q.placeholder,
            key=f"q_{q.field}", label_visibility="collapsed",
        )
        wizard.set_answer(q.field, value)

    elif q.kind == QuestionKind.TOGGLE:
        value = st.toggle(
            "Weekly Coach Check-ins", value=bool(current), key=f"q_{q.field}",
        )
        st.caption("Get personalized feedback and adjustments to your plan")
        wizard.set_answer(q.field, value)

    # Free-text companion for "Other" diets
    if q.field == "diet_restriction" and wizard.get_answer(q.field) == "Other":
        details = st.text_area(
            "Details", value=wizard.get_answer(q.companion_field) or "",
            placeholder=q.placeholder, key=f"q_{q.companion_field}",
        )
        wizard.set_answer(q.companion_field, details)


def _render_wizard() -> None:
    wizard = _wizard()

    st.title("Elite Fitness Assessment")
    st.caption("Get your personalized fitness plan in just a few minutes")
    st.progress(wizard.progress, text=wizard.step_label)

    _render_question(wizard, wizard.current_question)

    error = st.session_state.pop("intake_error", None)
    if error:
        st.error(error)

    col_prev, col_next = st.columns(2)
    with col_prev:
        if st.button("◀ Previous", disabled=wizard.is_first_step):
            wizard.go_back()
            st.rerun()
    with col_next:
        if not wizard.is_last_step:
            if st.button("Next ▶", type="primary"):
                try:
                    wizard.advance()
                except IntakeError as exc:
                    st.session_state["intake_error"] = str(exc)
                st.rerun()
        elif st.button("Get My Plan", type="primary"):
            try:
                record = wizard.submit()
            except IntakeError as exc:
                st.session_state["intake_error"] = str(exc)
            else:
                st.session_state["record"] = record
                st.session_state["plan"] = get_engine().derive(record)
            st.rerun()


# ---------------------------------------------------------------------------
# Results page
# ---------------------------------------------------------------------------


def _render_results(record, plan) -> None:
    st.success("Your Plan is Ready!")
    st.title("Your Personalized Fitness Journey")
    st.markdown(goal_summary(record))

    stats, nutrition_col, goal_col = st.columns(3)
    with stats:
        st.markdown("**Fitness Stats**")
        st.metric("Current Weight", format_weight(record.weight, record.weight_unit))
        st.metric(
            "Target Weight",
            format_weight(record.target_weight, record.weight_unit),
            delta=format_weight_change(plan, record.weight_unit),
            delta_color="off",
        )
        st.metric("BMI", plan.metrics.bmi_display)
        st.metric("Activity Level", ACTIVITY_LABELS[record.activity_level])
    with nutrition_col:
        st.markdown("**Nutrition Targets**")
        nutrition = plan.nutrition
        st.metric("Daily Calories", format_calories(nutrition and nutrition.daily_calories))
        st.metric("Protein", format_grams(nutrition and nutrition.protein_grams))
        st.metric("Carbs", format_grams(nutrition and nutrition.carb_grams))
        st.metric("Fats", format_grams(nutrition and nutrition.fat_grams))
    with goal_col:
        st.markdown("**Your Goal**")
        st.metric("Goal", GOAL_LABELS[record.goal])
        st.metric("Timeline", plan.timeline)
        st.metric("Workout Days", f"{record.workout_days_per_week} days/week")

    tab_workout, tab_meal, tab_lifestyle = st.tabs(
        ["Workout Plan", "Meal Plan", "Lifestyle Tips"]
    )

    with tab_workout:
        if not plan.workout_schedule:
            st.info(
                "No fixed template for this goal yet. Pick the sessions you enjoy "
                "and keep them consistent."
            )
        for day in plan.workout_schedule:
            with st.expander(f"{day.label}: {day.focus}", expanded=True):
                for exercise in day.exercises:
                    st.markdown(f"- {exercise}")
        st.subheader("Workout Guidelines")
        for line in training_guidelines():
            st.markdown(f"- {line}")

    with tab_meal:
        for meal in plan.meal_schedule:
            color = MEAL_COLORS.get(meal.label, "#EEEEEE")
            st.markdown(
                f'<div style="background:{color};padding:10px;border-radius:8px;margin:4px 0;">'
                f"<strong>{meal.label}</strong> · {format_calories(meal.calories)}<br>"
                f"{meal.food_description}</div>",
                unsafe_allow_html=True,
            )
        st.dataframe(meal_schedule_frame(plan), hide_index=True, use_container_width=True)
        if plan.nutrition is not None:
            st.subheader("Macro Breakdown")
            st.bar_chart(macro_breakdown_frame(plan.nutrition)["Calories"])
        st.subheader("Nutrition Tips")
        for line in nutrition_tips(plan.nutrition):
            st.markdown(f"- {line}")

    with tab_lifestyle:
        for section, tips in lifestyle_tips().items():
            st.markdown(f"**{section}**")
            for line in tips:
                st.markdown(f"- {line}")

    st.divider()
    st.subheader("Stay Accountable & Track Progress")
    st.markdown(f"**First check-in:** {format_date(first_check_in(date.today()))}")
    if record.want_coaching:
        st.markdown("You've opted in to weekly coaching check-ins:")
        for line in COACHING_BENEFITS:
            st.markdown(f"- {line}")

    st.download_button(
        "Download Plan (.json)",
        data=to_plan_json_string(plan),
        file_name="fitness_plan.json",
        mime="application/json",
    )
    if st.button("Start Over"):
        _start_over()
        st.rerun()
    st.caption(f"Your plan has been sent to {record.email}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

if "plan" in st.session_state:
    _render_results(st.session_state["record"], st.session_state["plan"])
else:
    _render_wizard()
