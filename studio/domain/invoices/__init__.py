"""Invoices domain - one invoice per booking"""
