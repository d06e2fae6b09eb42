"""Ports implemented by the driven adapters"""
