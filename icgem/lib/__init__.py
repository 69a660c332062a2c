"""Icgem library modules

"""
