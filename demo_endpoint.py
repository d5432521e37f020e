"""
Quick demo script to run the Sólon portal backend locally.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Sólon Portal Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Sync:          POST http://localhost:8000/solon/sync")
    print("   - Portal view:   POST http://localhost:8000/solon/portal?view=jobs&tab=map")
    print("   - Share:         GET  http://localhost:8000/solon/share")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/solon/sync" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"country": "México", "location": "Ciudad de México", "skills": "Ventas"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "solon.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
