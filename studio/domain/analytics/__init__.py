"""Analytics domain - booking counts and revenue for the dashboard"""
