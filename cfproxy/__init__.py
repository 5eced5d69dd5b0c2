"""Codeforces problem proxy: tag queries, rating order, exact-match filtering."""
