"""
Source Code Root Module

Root package of the smart home lock bridge. It connects the Google Smart
Home fulfillment protocol and HomeGraph with a device state store and the
physical lock vendor API.

Layer Structure:
- Domain: Devices, trait states, errors and the ports the core depends on
- Application: Intent handling use cases and DTOs
- Infrastructure: State store backends, HTTP gateways and background services
- Presentation: FastAPI controllers for fulfillment, identity stubs and ops
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
