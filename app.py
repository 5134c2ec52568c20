"""Streamlit front-end for the compression benchmark."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import streamlit as st

from nested_zip import (
    BenchmarkContext,
    CleanupUseCase,
    FileSystemSizeProbe,
    RunBenchmarkUseCase,
    SizeComparator,
    TextFixtureRepository,
    ZipDirectArchiver,
    ZipNestedArchiver,
)
from nested_zip.application.dto import BenchmarkRequest, BenchmarkResponse
from nested_zip.config import Settings
from nested_zip.domain.results import ComparisonReport
from nested_zip.infrastructure.storage import settings_store
from nested_zip.presentation.size_report import render_csv, render_html, report_to_rows


st.set_page_config(page_title="Nested Zip Benchmark", layout="wide")
st.title("Nested Zip Benchmark")


def report_to_dataframe(report: ComparisonReport) -> pd.DataFrame:
    df = pd.DataFrame(report_to_rows(report))
    df["bytes"] = df["bytes"].astype(int)
    df["ratio"] = df["ratio"].astype(float)
    return df


def run_benchmark(settings: Settings) -> tuple[BenchmarkResponse, list[str]]:
    progress: list[str] = []
    request = BenchmarkRequest(spec=settings.fixture_spec(), paths=settings.paths())
    context = BenchmarkContext(
        fixture_repository=TextFixtureRepository(),
        direct_archiver=ZipDirectArchiver(),
        nested_archiver=ZipNestedArchiver(),
        size_probe=FileSystemSizeProbe(),
        comparator=SizeComparator(),
    )
    response = RunBenchmarkUseCase(context, notify=progress.append).execute(request)
    return response, progress


if "result" not in st.session_state:
    st.session_state["result"] = None


defaults = settings_store.load_settings()
with st.sidebar:
    st.subheader("Settings")
    root = st.text_input("Working directory", value=str(defaults.root))
    file_count = st.number_input("Highest file index", min_value=0, value=defaults.file_count, step=1)
    line_count = st.number_input("Highest line index", min_value=0, value=defaults.line_count, step=1)
    text = st.text_area("Repeated text", value=defaults.text)
    settings = Settings(root=Path(root), file_count=int(file_count), line_count=int(line_count), text=text)
    if st.button("Save as defaults", key="save_settings_btn"):
        settings_store.save_settings(settings)
        st.success("Settings saved")

run_btn = st.button("Run benchmark", disabled=st.session_state["result"] is not None)
if run_btn:
    with st.spinner("Compressing..."):
        response, progress = run_benchmark(settings)
    st.session_state["result"] = {"response": response, "progress": progress}
    st.rerun()

result = st.session_state.get("result")
if not result:
    st.info("Choose settings and run the benchmark.")
else:
    response: BenchmarkResponse = result["response"]
    report = response.report

    with st.expander("Progress", expanded=False):
        for line in result["progress"]:
            st.text(line)

    st.subheader("Sizes")
    cols = st.columns(4)
    for col, measurement in zip(cols, report.iter_measurements()):
        col.metric(measurement.label, f"{measurement.size_bytes:,} B")

    if report.savings_bytes > 0:
        st.success(report.verdict.message)
    elif report.savings_bytes < 0:
        st.warning(report.verdict.message)
    else:
        st.info(report.verdict.message)

    st.dataframe(report_to_dataframe(report), hide_index=True)
    st.download_button(
        "Download sizes CSV",
        data=render_csv(report),
        file_name="nested_zip_sizes.csv",
        mime="text/csv",
    )
    st.download_button(
        "Download sizes HTML",
        data=render_html(report).encode("utf-8"),
        file_name="nested_zip_sizes.html",
        mime="text/html",
    )

    st.caption(f"Artifacts are in {response.paths.root}. Inspect them, then clean up.")
    if st.button("Clean up", key="cleanup_btn"):
        CleanupUseCase().execute(response)
        st.session_state["result"] = None
        st.rerun()
