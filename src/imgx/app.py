"""Streamlit application for Image Transformer."""

import hashlib
import logging
from typing import MutableMapping

import streamlit as st

from imgx.core.processor import ProcessingResult, process_image
from imgx.models.config import OPTION_NAMES, TransformConfig
from imgx.utils.file_handler import (
    DEFAULT_OUTPUT_NAME,
    SUPPORTED_EXTENSIONS,
    is_supported_image,
)

logger = logging.getLogger(__name__)

OPTION_LABELS = {
    "invert": ("Invert Colors", "Swap every color for its opposite"),
    "flip_horizontal": ("Flip Horizontal", "Mirror the image left to right"),
    "flip_vertical": ("Flip Vertical", "Mirror the image top to bottom"),
    "grayscale": ("Grayscale", "Remove color using perceived brightness"),
}

DEFAULT_OPTIONS = {name: getattr(TransformConfig(), name) for name in OPTION_NAMES}


def _option_key(name: str) -> str:
    return f"option_{name}"


def _hash_file(name: str, data: bytes) -> str:
    h = hashlib.sha256()
    h.update(name.encode())
    h.update(data)
    return h.hexdigest()


def _build_config(state: MutableMapping) -> TransformConfig:
    """Build a TransformConfig from the option checkboxes in session state."""
    return TransformConfig(
        **{name: bool(state.get(_option_key(name), DEFAULT_OPTIONS[name])) for name in OPTION_NAMES}
    )


def _init_state(state: MutableMapping) -> None:
    """Fill in session state defaults on first run."""
    for name in OPTION_NAMES:
        state.setdefault(_option_key(name), DEFAULT_OPTIONS[name])
    state.setdefault("uploader_key", 0)
    state.setdefault("last_result", None)


def _reset_state(state: MutableMapping) -> None:
    """Clear the upload and result, and restore the default options.

    Bumping the uploader key makes Streamlit render a fresh, empty uploader.
    """
    for name in OPTION_NAMES:
        state[_option_key(name)] = DEFAULT_OPTIONS[name]
    state["uploader_key"] = state.get("uploader_key", 0) + 1
    state["last_result"] = None
    state.pop("upload_hash", None)


def _track_upload(state: MutableMapping, name: str, data: bytes) -> bool:
    """Forget the previous result when a different image is uploaded.

    Returns:
        True if the upload changed since the last run.
    """
    file_hash = _hash_file(name, data)
    if state.get("upload_hash") == file_hash:
        return False
    state["upload_hash"] = file_hash
    state["last_result"] = None
    return True


def _get_result(
    state: MutableMapping, name: str, data: bytes, config: TransformConfig
) -> tuple[ProcessingResult, bool]:
    """Process an upload, reusing the last result for the same file and options.

    Returns:
        Tuple of (result, cached_hit).
    """
    cache_key = (_hash_file(name, data), config)
    cached_entry = state.get("last_result")
    if isinstance(cached_entry, dict) and cached_entry.get("key") == cache_key:
        return cached_entry["result"], True

    result = process_image(data, name, config)
    state["last_result"] = {"key": cache_key, "result": result}
    return result, False


def main():
    """Main Streamlit application entry point."""
    st.set_page_config(
        page_title="Image Transformer",
        page_icon="🔄",
        layout="wide",
    )

    st.title("Image Transformer")
    st.write("Flip, invert or grayscale an image, then download the result as PNG.")

    _init_state(st.session_state)

    # Sidebar configuration
    with st.sidebar:
        st.header("Options")
        for name in OPTION_NAMES:
            label, help_text = OPTION_LABELS[name]
            st.checkbox(label, key=_option_key(name), help=help_text)

        config = _build_config(st.session_state)
        for warning in config.validate():
            st.info(warning)

    uploaded_file = st.file_uploader(
        "Upload an image",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
        key=f"uploader_{st.session_state.uploader_key}",
        help="Drag and drop an image or click to browse",
    )

    if uploaded_file is None:
        st.info("👆 Upload an image to get started.")
        return

    if not is_supported_image(uploaded_file.name, uploaded_file.type):
        st.error(f"{uploaded_file.name} is not an image. Please upload an image file.")
        return

    data = uploaded_file.getvalue()
    _track_upload(st.session_state, uploaded_file.name, data)

    if st.button("Process Image", type="primary", use_container_width=True):
        with st.spinner("Processing image..."):
            result, cached_hit = _get_result(
                st.session_state, uploaded_file.name, data, config
            )
        if cached_hit:
            st.caption("Using cached result (same image and options)")

    result_entry = st.session_state.last_result
    cols = st.columns(2)

    with cols[0]:
        st.write("**Original**")
        st.image(data, use_container_width=True)

    with cols[1]:
        st.write("**Processed**")
        if result_entry is None:
            st.info("Choose options and press Process Image.")
        else:
            result: ProcessingResult = result_entry["result"]
            if result.success and result.output_data:
                st.image(result.output_data, use_container_width=True)
            else:
                for warning in result.warnings:
                    st.error(warning)

    if result_entry is not None and result_entry["result"].success:
        result = result_entry["result"]
        st.divider()
        download_col, reset_col = st.columns(2)
        with download_col:
            st.download_button(
                label="Download",
                data=result.output_data,
                file_name=DEFAULT_OUTPUT_NAME,
                mime="image/png",
                type="primary",
                use_container_width=True,
            )
        with reset_col:
            st.button(
                "Process Another",
                on_click=_reset_state,
                args=(st.session_state,),
                use_container_width=True,
            )


if __name__ == "__main__":
    main()
