"""Bookings domain - booking creation, updates and the status lifecycle"""
