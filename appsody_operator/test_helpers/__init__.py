"""Helpers shared by the appsody_operator tests"""
