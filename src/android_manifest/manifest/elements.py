"""Pydantic models for AndroidManifest.xml elements.

Each model mirrors one manifest element. Field aliases are the XML
attribute names (``android:name``); nested element lists are mapped to
child elements by :mod:`.xml_mapping` using each model's ``xml_tag``.

Attributes whose value is a delimited list use ``AttributeList``:
- ``<provider android:authorities>`` is ``;``-separated
- ``<activity android:configChanges>`` and ``android:windowSoftInputMode``
  are ``|``-separated
- ``<permission android:protectionLevel>`` is ``|``-separated
"""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..attribute_list import AttributeList, Semicolon, VerticalBar


class ConfigChange(str, Enum):
    """Configuration changes an activity handles itself."""

    MCC = "mcc"
    MNC = "mnc"
    LOCALE = "locale"
    TOUCHSCREEN = "touchscreen"
    KEYBOARD = "keyboard"
    KEYBOARD_HIDDEN = "keyboardHidden"
    NAVIGATION = "navigation"
    SCREEN_LAYOUT = "screenLayout"
    FONT_SCALE = "fontScale"
    UI_MODE = "uiMode"
    ORIENTATION = "orientation"
    DENSITY = "density"
    SCREEN_SIZE = "screenSize"
    SMALLEST_SCREEN_SIZE = "smallestScreenSize"
    LAYOUT_DIRECTION = "layoutDirection"
    COLOR_MODE = "colorMode"
    GRAMMATICAL_GENDER = "grammaticalGender"
    FONT_WEIGHT_ADJUSTMENT = "fontWeightAdjustment"


class WindowSoftInputMode(str, Enum):
    """Soft keyboard state and window adjustment flags."""

    STATE_UNSPECIFIED = "stateUnspecified"
    STATE_UNCHANGED = "stateUnchanged"
    STATE_HIDDEN = "stateHidden"
    STATE_ALWAYS_HIDDEN = "stateAlwaysHidden"
    STATE_VISIBLE = "stateVisible"
    STATE_ALWAYS_VISIBLE = "stateAlwaysVisible"
    ADJUST_UNSPECIFIED = "adjustUnspecified"
    ADJUST_RESIZE = "adjustResize"
    ADJUST_PAN = "adjustPan"
    ADJUST_NOTHING = "adjustNothing"


class ProtectionLevel(str, Enum):
    """Base protection level and flags of a permission."""

    NORMAL = "normal"
    DANGEROUS = "dangerous"
    SIGNATURE = "signature"
    SIGNATURE_OR_SYSTEM = "signatureOrSystem"
    PRIVILEGED = "privileged"
    SYSTEM = "system"
    DEVELOPMENT = "development"
    APPOP = "appop"
    PRE23 = "pre23"
    INSTALLER = "installer"
    VERIFIER = "verifier"
    PREINSTALLED = "preinstalled"
    SETUP = "setup"
    INSTANT = "instant"
    RUNTIME = "runtime"


Authorities = AttributeList[Semicolon, str]
ConfigChanges = AttributeList[VerticalBar, ConfigChange]
SoftInputModes = AttributeList[VerticalBar, WindowSoftInputMode]
ProtectionLevels = AttributeList[VerticalBar, ProtectionLevel]


class ManifestElement(BaseModel):
    """Base class of manifest element models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    xml_tag: ClassVar[str]


class PathPermission(ManifestElement):
    """Path and required permissions for a subset of a provider's data.

    Contained in ``<provider>``. Introduced in API level 4.
    """

    xml_tag: ClassVar[str] = "path-permission"

    path: str | None = Field(
        default=None,
        alias="android:path",
        description="Complete URI path for a subset of provider data",
    )
    path_prefix: str | None = Field(
        default=None,
        alias="android:pathPrefix",
        description="Initial part of a URI path",
    )
    path_pattern: str | None = Field(
        default=None,
        alias="android:pathPattern",
        description="Complete URI path with '*' and '.*' wildcards",
    )
    permission: str | None = Field(
        default=None,
        alias="android:permission",
        description="Permission for both reading and writing",
    )
    read_permission: str | None = Field(
        default=None,
        alias="android:readPermission",
        description="Permission required to query the provider",
    )
    write_permission: str | None = Field(
        default=None,
        alias="android:writePermission",
        description="Permission required to change the provider's data",
    )


class MetaData(ManifestElement):
    """Name-value pair of arbitrary data supplied to the parent component.

    Use ``value`` for ordinary values and ``resource`` to assign a
    resource ID (e.g. ``@string/kangaroo``).
    """

    xml_tag: ClassVar[str] = "meta-data"

    name: str | None = Field(
        default=None,
        alias="android:name",
        description="Unique item name, Java-style (e.g. 'com.example.project.activity.fred')",
    )
    resource: str | None = Field(
        default=None,
        alias="android:resource",
        pattern=r"^@",
        description="Resource reference whose ID becomes the value",
    )
    value: str | None = Field(
        default=None,
        alias="android:value",
        description="Value assigned to the item",
    )


class Data(ManifestElement):
    """Data specification of an intent filter.

    A URI is ``<scheme>://<host>:<port>[<path>|<pathPrefix>|<pathPattern>]``.
    If no scheme is set, the other URI attributes are ignored; if no host
    is set, port and path attributes are ignored.
    """

    xml_tag: ClassVar[str] = "data"

    scheme: str | None = Field(default=None, alias="android:scheme")
    host: str | None = Field(default=None, alias="android:host")
    port: str | None = Field(default=None, alias="android:port", pattern=r"^[0-9]+$")
    path: str | None = Field(default=None, alias="android:path")
    path_pattern: str | None = Field(default=None, alias="android:pathPattern")
    path_prefix: str | None = Field(default=None, alias="android:pathPrefix")
    mime_type: str | None = Field(default=None, alias="android:mimeType")


class IntentFilter(ManifestElement):
    """Intents a component can respond to."""

    xml_tag: ClassVar[str] = "intent-filter"

    priority: int | None = Field(default=None, alias="android:priority")
    data: list[Data] = Field(default_factory=list, description="Data specifications")


class Provider(ManifestElement):
    """Content provider component."""

    xml_tag: ClassVar[str] = "provider"

    name: str | None = Field(default=None, alias="android:name")
    authorities: Authorities | None = Field(
        default=None,
        alias="android:authorities",
        description="URI authorities identifying the provider's data",
    )
    enabled: bool | None = Field(default=None, alias="android:enabled")
    exported: bool | None = Field(default=None, alias="android:exported")
    grant_uri_permissions: bool | None = Field(default=None, alias="android:grantUriPermissions")
    init_order: Annotated[int, Field(ge=0)] | None = Field(default=None, alias="android:initOrder")
    meta_data: list[MetaData] = Field(default_factory=list)
    path_permissions: list[PathPermission] = Field(default_factory=list)


class Activity(ManifestElement):
    """Activity component."""

    xml_tag: ClassVar[str] = "activity"

    name: str | None = Field(default=None, alias="android:name")
    config_changes: ConfigChanges | None = Field(
        default=None,
        alias="android:configChanges",
        description="Configuration changes handled by the activity itself",
    )
    window_soft_input_mode: SoftInputModes | None = Field(
        default=None,
        alias="android:windowSoftInputMode",
        description="Soft keyboard state and window adjustment",
    )
    exported: bool | None = Field(default=None, alias="android:exported")
    intent_filters: list[IntentFilter] = Field(default_factory=list)
    meta_data: list[MetaData] = Field(default_factory=list)


class Permission(ManifestElement):
    """Security permission declared by the application."""

    xml_tag: ClassVar[str] = "permission"

    name: str | None = Field(default=None, alias="android:name")
    permission_group: str | None = Field(default=None, alias="android:permissionGroup")
    protection_level: ProtectionLevels | None = Field(
        default=None,
        alias="android:protectionLevel",
        description="Base protection level plus optional flags",
    )
