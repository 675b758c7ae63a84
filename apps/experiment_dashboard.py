"""
Experiment Dashboard - A/B test sizing and simulation.

Streamlit app with pages: Design, Run Simulation, Sequential Trend.
"""

import sys
from pathlib import Path

# Add project root
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

import pandas as pd
import streamlit as st

from src.abtesting import (
    DomainError,
    ExperimentParameters,
    SimulationConfig,
    compute_sample_size,
    load_use_cases,
    run_simulation,
    validate_parameters,
)
from src.abtesting.stats import checkpoints_to_frame, mde_proportion

st.set_page_config(page_title="A/B Testing Framework", page_icon="📊", layout="wide")


def main():
    st.title("📊 A/B Testing Framework")
    st.caption("Size an experiment, simulate it, and watch significance evolve.")

    use_cases = load_use_cases()
    names = ["Custom"] + [uc.name for uc in use_cases]
    choice = st.sidebar.selectbox("Select a use case", names)
    preset = next((uc for uc in use_cases if uc.name == choice), None)
    if preset:
        st.sidebar.info(preset.description)

    baseline = st.sidebar.number_input(
        "Baseline conversion rate", 0.001, 0.999,
        preset.baseline_rate if preset else 0.10, 0.01, format="%.3f",
    )
    mde = st.sidebar.number_input(
        "Minimum detectable effect (relative)", 0.01, 0.99,
        preset.mde if preset else 0.10, 0.01,
    )
    confidence = st.sidebar.slider("Confidence level", 0.80, 0.99, 0.95, 0.01)
    power = st.sidebar.slider("Statistical power", 0.80, 0.99, 0.80, 0.01)
    seed = st.sidebar.number_input("Random seed", 0, 1_000_000, 42, 1)

    tab1, tab2, tab3 = st.tabs(["Design", "Run Simulation", "Sequential Trend"])

    reason = validate_parameters(baseline, mde, confidence, power)

    with tab1:
        st.header("Experiment Design")
        if reason:
            st.error(reason)
        else:
            try:
                n_needed = compute_sample_size(baseline, mde, confidence, power)
                st.info(f"Sample size needed per arm: **{n_needed:,}**")
                mde_ach = mde_proportion(baseline, 500, confidence, power)
                st.info(f"With 500/arm, detectable MDE: **{mde_ach*100:.1f}%** relative")
            except DomainError as e:
                st.error(str(e))

    with tab2:
        st.header("Run Simulation")
        if st.button("Run Test", disabled=bool(reason)):
            with st.spinner("Running..."):
                try:
                    params = ExperimentParameters(baseline, mde, confidence, power)
                    report = run_simulation(params, SimulationConfig(random_seed=int(seed)))
                    st.session_state["report"] = report
                except DomainError as e:
                    st.error(str(e))

        report = st.session_state.get("report")
        if report:
            out = report.outcome
            c1, c2 = st.columns(2)
            with c1:
                st.metric("Control rate", f"{out.control_rate:.4f}")
                st.metric("Variant rate", f"{out.variant_rate:.4f}")
                lift = out.relative_improvement
                st.metric("Relative improvement", f"{lift:.2%}" if lift is not None else "—")
            with c2:
                st.metric("p-value", f"{out.p_value:.4f}")
                st.metric("Significant", "Yes" if out.significant else "No")
                st.metric("Sample size per arm", f"{report.sample_size:,}")
            st.table(pd.DataFrame(
                [{"arm": arm, "ci_low": lo, "ci_high": hi}
                 for arm, (lo, hi) in out.confidence_intervals.items()]
            ))
            st.markdown(f"**Conclusion:** {out.conclusion.describe()}")
        else:
            st.info("Run a simulation to see results.")

    with tab3:
        st.header("Sequential Analysis")
        report = st.session_state.get("report")
        if report and report.checkpoints:
            df = checkpoints_to_frame(report.checkpoints).set_index("sample_size")
            st.line_chart(df[["p_value"]])
            st.line_chart(df[["relative_improvement"]])
            if report.peek_warning:
                st.warning(report.peek_message)
        else:
            st.info("Run a simulation to see the sequential trend.")


if __name__ == "__main__":
    main()
