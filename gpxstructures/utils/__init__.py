"""Shared helpers for gpxstructures"""
