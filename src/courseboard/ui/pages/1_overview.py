import streamlit as st
from courseboard.ui.api_client import get_client, APIError
from courseboard.ui.presenters import (
    PLACEHOLDER, bar_colors, course_subtitle, kpi_value, paid_ratio_text, rate_text, status_label,
)
from courseboard.ui.state import init_session, get_last_dashboard, remember_dashboard

st.title("Course Administration")

init_session()
client = get_client()

if st.button("Reload"):
    try:
        client.reload_dashboard()
    except APIError as e:
        st.error(f"Reload failed: {e.detail}")

try:
    dashboard = client.get_dashboard()
except APIError as e:
    st.error(f"Failed to load dashboard: {e.detail}")
    st.stop()

remember_dashboard(dashboard)
loading = dashboard.state.value == "loading"

if dashboard.state.value == "failed":
    st.error(f"Could not load data: {dashboard.error}")

# Keep showing the last good numbers while loading or after a failed reload.
view = dashboard.view
if view is None:
    last = get_last_dashboard()
    view = last.view if last is not None else None

if view is None:
    if loading:
        st.info("Loading…")
    st.stop()

counts = view.counts
payments = view.payments

# --- KPI Cards ---
c1, c2, c3, c4, c5 = st.columns(5)
c1.metric("Instructors", kpi_value(counts.instructors, loading=loading))
c2.metric("Participants", kpi_value(counts.participants, loading=loading))
c3.metric("Rooms", kpi_value(counts.rooms, loading=loading))
c4.metric(
    "Active Courses", kpi_value(counts.active_courses, loading=loading),
    delta=f"{counts.planned_courses} planned", delta_color="off",
)
c5.metric(
    "Paid", kpi_value(paid_ratio_text(payments.paid_count, counts.registrations), loading=loading),
    delta=f"{payments.outstanding_count} outstanding", delta_color="off",
)

st.divider()

left, right = st.columns([1, 2])

# --- Status Chart ---
with left:
    st.subheader("Course Status")
    st.caption(f"{counts.courses} courses")
    if not view.status_distribution:
        st.info("No courses yet")
    else:
        st.bar_chart(
            {
                "status": [status_label(b.label) for b in view.status_distribution],
                "courses": [b.count for b in view.status_distribution],
                "color": bar_colors(view.status_distribution),
            },
            x="status", y="courses", color="color",
        )

# --- Upcoming Courses ---
with right:
    st.subheader("Upcoming Courses")
    if not view.upcoming:
        st.info("No upcoming courses")
    for course in view.upcoming:
        title_col, badge_col = st.columns([4, 1])
        title_col.markdown(f"**{course.title or PLACEHOLDER}**  \n{course_subtitle(course)}")
        if course.status:
            badge_col.caption(status_label(course.status))

st.divider()

# --- Payment Summary ---
if counts.registrations == 0:
    st.info("No registrations yet")
else:
    p1, p2, p3 = st.columns(3)
    p1.metric("Paid registrations", payments.paid_count)
    p2.metric("Payment outstanding", payments.outstanding_count)
    p3.metric("Payment rate", rate_text(payments.rate))
