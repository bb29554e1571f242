"""Qt presentation layer for the multi-select spinner"""
