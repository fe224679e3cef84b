"""Helpers for reading MJCF files and compiling them into MuJoCo models."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import mujoco

logger = logging.getLogger(__name__)

_ASSET_DIR_ATTRS = ("meshdir", "texturedir", "assetdir")


def load_model_xml(path: str) -> str:
    """Read an MJCF file from disk.

    Relative asset directories on the ``<compiler>`` tag are resolved to
    absolute paths so that ``mujoco.MjModel.from_xml_string`` can locate
    assets regardless of the current working directory.

    Raises ``FileNotFoundError`` with a helpful message if missing.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(
            f"MJCF not found at '{path}'.  "
            "Make sure the XML file exists."
        )
    xml_text = p.read_text()

    root = ET.fromstring(xml_text)
    compiler = root.find("compiler")
    if compiler is not None:
        changed = False
        for attr in _ASSET_DIR_ATTRS:
            value = compiler.get(attr)
            if value and not Path(value).is_absolute():
                compiler.set(attr, str((p.parent / value).resolve()))
                changed = True
        if changed:
            xml_text = ET.tostring(root, encoding="unicode")

    return xml_text


def build_model(path: str) -> mujoco.MjModel:
    """Compile the MJCF at ``path`` into an ``MjModel``."""
    model = mujoco.MjModel.from_xml_string(load_model_xml(path))
    logger.debug(
        "Loaded model %s: nq=%d nv=%d nsensordata=%d", path, model.nq, model.nv,
        model.nsensordata,
    )
    return model
