"""
Admina skill: MCP tools over the Admina (Money Forward Admina) REST API.

Devices, identities, people, services and provisioning, each exposed as a
tool that validates its input, issues one HTTP request and returns the
upstream JSON.
"""
