"""
FastAPI Web Application for Bumps Results

This module provides a REST API for browsing and exporting bumps race
results, including per-crew position trails, finishing orders and
conversions between the tabular and notation formats.
"""

from typing import Dict, List
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from bumps_results import analyze_bumps


# ============================================================================
# APPLICATION SETUP
# ============================================================================

app = FastAPI()


# ============================================================================
# DATASET DISCOVERY
# ============================================================================

def get_available_datasets() -> list:
    """
    Discover available results files in the Results Data directory.

    Scans the data directory for notation (.txt) and tabular (.csv) files
    and returns a list of available datasets with their filenames.

    Returns:
        List of dictionaries with 'filename' and 'display_name' keys.
    """
    data_dir = analyze_bumps.DATA_DIR
    datasets = []

    if not data_dir.exists():
        return datasets

    for file_path in data_dir.iterdir():
        if file_path.suffix.lower() not in analyze_bumps.DATASET_SUFFIXES:
            continue

        display_name = file_path.stem.replace("_", " ").title()
        datasets.append({
            "filename": file_path.name,
            "display_name": display_name,
        })

    # Sort by filename
    datasets.sort(key=lambda x: x["filename"])
    return datasets


# ============================================================================
# DATASET LOADING & CACHING
# ============================================================================

# Cache for loaded datasets (dataset_filename -> events)
dataset_cache: Dict[str, List[analyze_bumps.Event]] = {}


def load_dataset(dataset_filename: str) -> List[analyze_bumps.Event]:
    """
    Load and decode every event in a results file.

    Datasets are cached to avoid re-reading on subsequent requests.

    Args:
        dataset_filename: Name of the file in the data directory.

    Returns:
        List of decoded events.

    Raises:
        HTTPException: If the dataset does not exist (status 404) or its
            results are invalid (status 422).
    """
    if dataset_filename in dataset_cache:
        return dataset_cache[dataset_filename]

    data_file = analyze_bumps.DATA_DIR / dataset_filename
    if data_file.name != dataset_filename or not data_file.exists():
        raise HTTPException(status_code=404, detail=f"Dataset not found: {dataset_filename}")

    try:
        events = analyze_bumps.load_events(data_file)
    except analyze_bumps.BumpsError as exc:
        raise HTTPException(
            status_code=422,
            detail=f"Failed to load results: {exc}"
        ) from exc

    dataset_cache[dataset_filename] = events
    return events


def load_event(dataset_filename: str, index: int) -> analyze_bumps.Event:
    """Load one event from a dataset, raising 404 if the index is unknown."""
    events = load_dataset(dataset_filename)
    try:
        return analyze_bumps.select_event(events, index)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# ============================================================================
# ROOT
# ============================================================================

@app.get("/")
def read_root():
    """
    List the datasets that can be browsed.

    Returns:
        List of dictionaries with 'filename' and 'display_name' keys.
    """
    return get_available_datasets()


# ============================================================================
# API ROUTES - DATASET MANAGEMENT
# ============================================================================

@app.get("/api/datasets")
def get_datasets():
    """
    Get list of available datasets.

    Returns:
        List of dictionaries with 'filename' and 'display_name' keys.
    """
    return get_available_datasets()


# ============================================================================
# API ROUTES - DATA RETRIEVAL
# ============================================================================

@app.get("/api/events")
def get_events(dataset: str = Query(..., description="Dataset filename to load")):
    """
    Get a summary of every event in a dataset.

    Args:
        dataset: Dataset filename.

    Returns:
        List of event summaries (index, set, gender, year, days, sizes).
    """
    events = load_dataset(dataset)
    return [analyze_bumps.summarize_event(event, i) for i, event in enumerate(events)]


@app.get("/api/event/{index}")
def get_event(index: int, dataset: str = Query(..., description="Dataset filename to load")):
    """
    Get the complete payload for one event.

    Returns division extents, per-crew position trails with blades/spoons
    flags, the finishing order and the results notation.

    Args:
        index: Event index within the dataset (0-indexed).
        dataset: Dataset filename.

    Returns:
        Dictionary containing the complete event payload.
    """
    event = load_event(dataset, index)
    try:
        return analyze_bumps.build_event_payload(event)
    except analyze_bumps.BumpsError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# ============================================================================
# API ROUTES - EXPORT
# ============================================================================

@app.get("/api/export/flat")
def export_flat(dataset: str = Query(..., description="Dataset filename to export")):
    """
    Export every event in a dataset as tabular CSV.

    Args:
        dataset: Dataset filename.

    Returns:
        PlainTextResponse: CSV file with Content-Disposition header
        for download. Filename: <dataset stem>.csv
    """
    events = load_dataset(dataset)
    try:
        csv_body = analyze_bumps.export_flat_csv(events)
    except analyze_bumps.BumpsError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    stem = dataset.rsplit(".", 1)[0]
    headers = {"Content-Disposition": f"attachment; filename={stem}.csv"}
    return PlainTextResponse(
        csv_body,
        media_type="text/csv",
        headers=headers
    )


@app.get("/api/export/notation/{index}")
def export_notation(index: int, dataset: str = Query(..., description="Dataset filename to export")):
    """
    Export one event as a notation document.

    Args:
        index: Event index within the dataset (0-indexed).
        dataset: Dataset filename.

    Returns:
        PlainTextResponse: Notation text with Content-Disposition header
        for download. Filename: <short>_<gender>_<year>.txt

    Raises:
        HTTPException: If index is not found (status 404).
    """
    event = load_event(dataset, index)
    body = analyze_bumps.write_notation(event)

    filename = f"{event.short_name}_{event.gender}_{event.year}.txt".replace(" ", "_")
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    return PlainTextResponse(
        body,
        media_type="text/plain",
        headers=headers
    )


@app.get("/api/export/trails/{index}")
def export_trails(index: int, dataset: str = Query(..., description="Dataset filename to export")):
    """
    Export one event's position trails as CSV.

    Args:
        index: Event index within the dataset (0-indexed).
        dataset: Dataset filename.

    Returns:
        PlainTextResponse: CSV file with one row per crew.
    """
    payload = get_event(index, dataset)
    headers = {"Content-Disposition": f"attachment; filename=trails_{index}.csv"}
    return PlainTextResponse(
        analyze_bumps.export_trails_csv(payload),
        media_type="text/csv",
        headers=headers
    )


# ============================================================================
# RUN INSTRUCTIONS
# ============================================================================
# Run with: uvicorn app:app --reload
