"""
Workflow templates built from capture session details.

The photogrammetry template covers the whole pipeline from a fresh scene to
a Sketchfab upload; stage ids are fresh on every call, like a file load.
"""

import re
import uuid
from collections.abc import Sequence
from datetime import datetime

from rcflow.domain.models import Command, Stage, Workflow, WorkflowMetadata

SOCIAL_SHARING_DEFAULTS = (
    "social=instagram:false,twitter:false,facebook:false,reddit:false,tiktok:false"
)


def sanitize_name(name: str) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return re.sub(r"[^a-zA-Z0-9]", "_", name)


def _cmd(command: str, *params: str, description: str | None = None) -> Command:
    return Command(command=command, params=tuple(params), description=description)


def _stage(
    name: str, commands: Sequence[Command], description: str | None = None
) -> Stage:
    return Stage(
        id=str(uuid.uuid4()),
        name=name,
        commands=tuple(commands),
        description=description,
    )


def photogrammetry_template(
    session_name: str, subject: str = "Object", tags: Sequence[str] = ()
) -> Workflow:
    """
    Build the complete capture-to-export pipeline for one session.

    Args:
        session_name: Capture session name (sanitized for paths)
        subject: Subject matter, used for model names and upload title
        tags: Extra tags for metadata and the upload

    Returns:
        A Workflow ready for execution
    """
    name = sanitize_name(session_name)
    project = f"./projects/{name}"
    images = f"{project}/Images"
    output = f"{project}/Output"
    simplified = f"{subject}_Simplified"

    stages = [
        _stage(
            "Initialize",
            [
                _cmd("headless"),
                _cmd("newScene"),
                _cmd("createFolder", project),
                _cmd("createFolder", images),
                _cmd("createFolder", output),
                _cmd("createFolder", f"{output}/Renders"),
                _cmd("tag", "session", session_name),
                _cmd("tag", "subject", subject),
            ],
            "Setting up the project structure and initializing Reality Capture",
        ),
        _stage(
            "Import Initial Construction Images",
            [
                _cmd(
                    "addFolder",
                    f"{images}/.geometry",
                    description="Adding construction images without masks first",
                )
            ],
        ),
        _stage(
            "First Alignment",
            [
                _cmd("align"),
                _cmd("selectMaximalComponent"),
                _cmd("printProgress", "Initial alignment completed"),
            ],
        ),
        _stage(
            "Marker Recognition",
            [
                _cmd("detectMarkers", "auto", description="Auto-detecting markers"),
                _cmd(
                    "loadMarkersData",
                    f"{project}/markers.csv",
                    description="Loading marker coordinate data from CSV file",
                ),
                _cmd(
                    "applyMarkerDistances",
                    description="Applying real-world distances between markers",
                ),
                _cmd(
                    "setGroundPointFromMarker",
                    "1",
                    description="Setting ground point from marker #1",
                ),
            ],
        ),
        _stage(
            "Lock Initial Cameras",
            [
                _cmd("selectAll"),
                _cmd("lockSelectedCameras"),
                _cmd("printProgress", "Cameras locked"),
            ],
        ),
        _stage(
            "Import Masks and Texturing Images",
            [
                _cmd("addFolder", f"{images}/.mask"),
                _cmd("addFolder", f"{images}/.texture.TextureLayer"),
            ],
        ),
        _stage(
            "Import Additional Passes",
            [
                _cmd("addFolder", f"{images}/Additional"),
                _cmd("addFolder", f"{images}/Additional/.mask"),
                _cmd("addFolder", f"{images}/Additional/.texture.TextureLayer"),
            ],
        ),
        _stage(
            "Complete Alignment",
            [
                _cmd("align"),
                _cmd("selectMaximalComponent"),
                _cmd("save", f"{project}/Project/{name}_aligned.rcproj"),
            ],
        ),
        _stage(
            "Mesh Creation",
            [
                _cmd("setReconstructionRegionAuto"),
                _cmd("calculateModel", "medium"),
                _cmd("renameSelectedModel", subject),
                _cmd("printProgress", "Medium mesh created"),
            ],
        ),
        _stage(
            "Mesh Cleanup",
            [
                _cmd("selectIsolatedRegions"),
                _cmd("removeSelectedTriangles"),
                _cmd("selectNonManifoldTriangles"),
                _cmd("removeSelectedTriangles"),
                # very dark triangles are background remnants
                _cmd("selectByColor", "0", "0", "0", "10"),
                _cmd("removeSelectedTriangles"),
                _cmd("printProgress", "Mesh cleaned"),
            ],
        ),
        _stage(
            "Texturing",
            [
                _cmd("calculateTexture", "4096"),
                _cmd("save", f"{project}/Project/{name}_textured.rcproj"),
                _cmd("printProgress", "Texturing completed"),
            ],
        ),
        _stage(
            "Optimization",
            [
                _cmd("simplify", "5000"),
                _cmd("renameSelectedModel", simplified),
                _cmd("unwrap"),
                _cmd("reprojectTexture", subject, simplified, "4096", "normalmap"),
                _cmd("printProgress", "Optimization completed"),
            ],
        ),
        _stage(
            "Render Views",
            [
                _cmd("renderTurntable", "6", "1920", "1080", f"{output}/Renders/view_"),
                _cmd("printProgress", "Renders completed"),
            ],
        ),
        _stage(
            "Export",
            [
                _cmd("exportModel", simplified, f"{output}/{name}.glb", "glb"),
                _cmd("exportMetadata", f"{output}/{name}_metadata.json"),
                _cmd("printProgress", "Export completed"),
            ],
        ),
        _stage(
            "Upload to Sketchfab",
            [
                _cmd(
                    "sketchfabUpload",
                    f"{output}/{name}.glb",
                    f"{subject} 3D Scan",
                    f"3D scan of {subject} created with Reality Capture",
                    ",".join(("photogrammetry", "3d-scan", *tags)),
                    "",
                    SOCIAL_SHARING_DEFAULTS,
                ),
                _cmd("printProgress", "Upload completed"),
            ],
        ),
    ]

    now = datetime.now().isoformat()
    return Workflow(
        id=str(uuid.uuid4()),
        name=f"Complete {subject} Photogrammetry Pipeline",
        stages=tuple(stages),
        created_at=now,
        updated_at=now,
        metadata=WorkflowMetadata(
            description=f"Full photogrammetry pipeline for {subject}",
            version="1.0",
            tags=tuple(tags),
            requires_markers=True,
            requires_masks=True,
            requires_textures=True,
        ),
    )


def template_from_session(
    session_name: str, subject_matter: str | None = None, tags: Sequence[str] = ()
) -> Workflow:
    """Template for a session; subject defaults to 'Object'."""
    return photogrammetry_template(session_name, subject_matter or "Object", tags)
