"""Constants used throughout create-unity-template."""

# Build roots are named "<TEMPLATE_NAMESPACE>.<identifier>-<version>"
TEMPLATE_NAMESPACE = "com.unity.template"

# Folder defaults, each overridable through the named environment variable
BUILDS_DIR = "builds"
BUILDS_DIR_ENV = "UNITY_TEMPLATE_BUILDS_DIR"
OUTPUTS_DIR = "outputs"
OUTPUTS_DIR_ENV = "UNITY_TEMPLATE_OUTPUTS_DIR"
CONFIG_FILE = "config.toml"
CONFIG_FILE_ENV = "UNITY_TEMPLATE_CONFIG"

ARCHIVE_ROOT = "package"
ARCHIVE_SUFFIX = ".tgz"
PROJECT_DATA_DIR = "ProjectData~"

# The three source project folders that get transplanted
CONTENT_ROOTS = ("Assets", "Packages", "ProjectSettings")

# ============================================================================
# Skeleton layout, relative to the build root
# ============================================================================

SKELETON_DIRECTORIES = (
    ("package",),
    ("package", "Documentation~"),
    ("package", PROJECT_DATA_DIR),
    ("package", PROJECT_DATA_DIR, "Assets"),
    ("package", PROJECT_DATA_DIR, "Packages"),
    ("package", PROJECT_DATA_DIR, "ProjectSettings"),
    ("package", "Tests"),
)

SKELETON_FILES = (
    ("package", PROJECT_DATA_DIR, "Packages", "manifest.json"),
    ("package", "CHANGELOG.md"),
    ("package", "LICENSE.md"),
    ("package", "package.json"),
    ("package", "README.md"),
)

PACKAGE_METADATA_FILE = ("package", "package.json")

# Regenerated by the editor on import, never redistributed
EPHEMERAL_FILES = (
    ("package", PROJECT_DATA_DIR, "Packages", "packages-lock.json"),
    ("package", PROJECT_DATA_DIR, "ProjectSettings", "ProjectVersion.txt"),
)

# Copy A is read by the package manager, copy B is staged for the override script
MANIFEST_LOCATIONS = (
    ("package", PROJECT_DATA_DIR, "Packages", "manifest.json"),
    ("package", PROJECT_DATA_DIR, "Assets", "manifest.json"),
)

OVERRIDE_SCRIPT_NAME = "___ManifestOverride.cs"
OVERRIDE_SCRIPT_ARCNAME = f"{ARCHIVE_ROOT}/{PROJECT_DATA_DIR}/Assets/{OVERRIDE_SCRIPT_NAME}"

CATEGORIES = ("2D", "3D")
DEFAULT_PACKAGE_VERSION = "0.0.1"

DEFAULT_HUB_PATH = "C:\\Program Files\\Unity\\Hub\\Editor"
DEFAULT_DEPENDENCIES = (
    "com.unity.collab-proxy",
    "com.unity.feature.development",
    "com.unity.textmeshpro",
    "com.unity.timeline",
    "com.unity.visualscripting",
    "com.unity.ugui",
)
