"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.

This layer contains:
- Rank functions (video / audio quality)
- Retention classification
- Language tier classification
- Group-aware sorting
- The ranking pipeline and its observers
- Display formatting
"""
