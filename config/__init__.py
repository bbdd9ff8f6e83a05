"""
Configuration Package

Environment-driven settings shared by the sysfs_gpio library.
"""
