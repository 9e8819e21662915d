"""License lookup for publication descriptors."""

from __future__ import annotations

from cthing_publishing.exceptions import UnknownLicenseError
from cthing_publishing.models import LicenseBlock, PomLicense


def license_block(choice: PomLicense) -> LicenseBlock:
    """Return the license name and URL for a license.

    Raises:
        UnknownLicenseError: If `choice` is not a `PomLicense`.
    """
    match choice:
        case PomLicense.ASL2:
            return LicenseBlock(name="Apache-2.0", url="https://www.apache.org/licenses/LICENSE-2.0")
        case PomLicense.GPL2:
            return LicenseBlock(
                name="GPL-2.0-only",
                url="https://www.gnu.org/licenses/old-licenses/gpl-2.0-standalone.html",
            )
        case PomLicense.INTERNAL:
            return LicenseBlock(
                name="LicenseRef-CTHING-internal",
                url="https://www.cthing.com/licenses/internal.txt",
            )
        case PomLicense.JETBRAINS:
            return LicenseBlock(
                name="LicenseRef-JETBRAINS-toolbox",
                url="https://www.jetbrains.com/store/license_personal.html",
            )
        case PomLicense.MIT:
            return LicenseBlock(name="MIT", url="https://opensource.org/license/mit")
        case _:
            raise UnknownLicenseError(choice)


def parse_license(value: PomLicense | str) -> PomLicense:
    """Convert user input to a `PomLicense`.

    Accepts a member, a member name in any case (`"mit"`, `"ASL2"`) or a
    license name as published (`"Apache-2.0"`).

    Raises:
        UnknownLicenseError: If the value matches no supported license.
    """
    if isinstance(value, PomLicense):
        return value
    if isinstance(value, str):
        text = value.strip()
        member = PomLicense.__members__.get(text.upper())
        if member is not None:
            return member
        for candidate in PomLicense:
            if license_block(candidate).name == text:
                return candidate
    raise UnknownLicenseError(value)


def resolve_license(value: PomLicense | str) -> LicenseBlock:
    """Parse a license choice and return its license block."""
    return license_block(parse_license(value))
