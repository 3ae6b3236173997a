"""Helpers that build tables, trees and colours from plain data and run work under a spinner."""