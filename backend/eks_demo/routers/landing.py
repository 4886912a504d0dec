from html import escape
from string import Template

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from eks_demo.core.system_info import SystemInfoProvider, get_system_info

router = APIRouter(tags=["landing"])

LANDING_PAGE = Template("""
    <!DOCTYPE html>
    <html>
      <head>
        <title>Python on EKS</title>
        <style>
          body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            display: flex;
            justify-content: center;
            align-items: center;
            height: 100vh;
            margin: 0;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
          }
          .container {
            text-align: center;
            padding: 40px;
            background: rgba(255, 255, 255, 0.1);
            border-radius: 20px;
            backdrop-filter: blur(10px);
            box-shadow: 0 8px 32px 0 rgba(31, 38, 135, 0.37);
          }
          h1 { font-size: 3em; margin: 0; }
          p { font-size: 1.5em; margin: 20px 0; }
          .tech {
            display: inline-block;
            margin: 10px;
            padding: 10px 20px;
            background: rgba(255, 255, 255, 0.2);
            border-radius: 10px;
          }
        </style>
      </head>
      <body>
        <div class="container">
          <h1>🚀 Welcome to Python on AWS EKS!</h1>
          <p>Successfully deployed using Docker, ECR, and Kubernetes</p>
          <div>
            <span class="tech">🐳 Docker</span>
            <span class="tech">☸️ Kubernetes</span>
            <span class="tech">🗂️ ECR</span>
            <span class="tech">☁️ AWS EKS</span>
          </div>
          <p style="font-size: 1em; margin-top: 30px;">
            Hostname: $hostname<br>
            Python Version: $runtime_version
          </p>
        </div>
      </body>
    </html>
""")


def render_landing_page(hostname: str, runtime_version: str) -> str:
    return LANDING_PAGE.substitute(
        hostname=escape(hostname),
        runtime_version=escape(runtime_version),
    )


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
def landing(info: SystemInfoProvider = Depends(get_system_info)) -> HTMLResponse:
    return HTMLResponse(render_landing_page(info.hostname(), info.runtime_version()))
