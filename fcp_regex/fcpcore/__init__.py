"""Tokenizing, operation parsing, result formatting, event log, verb registry and session routing."""