"""LeetCode question parser adapter."""
