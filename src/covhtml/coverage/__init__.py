from .profile import (
    Profile,
    ProfileBlock,
    ProfileFile,
    parse_profile,
    read_module_path,
    read_profile,
    split_profile_name,
)

__all__ = [
    "Profile",
    "ProfileBlock",
    "ProfileFile",
    "parse_profile",
    "read_module_path",
    "read_profile",
    "split_profile_name",
]
