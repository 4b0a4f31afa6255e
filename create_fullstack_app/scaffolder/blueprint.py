"""Fixed layout of a generated project.

Everything the orchestrator writes is enumerated here: the directories each
package needs, the template -> output tables, the patches merged into the
Vite-generated client manifests, and the manifests created from scratch.
Manifests that depend on the project name are built by functions so every
call returns a fresh mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CLIENT_DIR = "client"
SERVER_DIR = "server"


@dataclass(frozen=True)
class TemplateFile:
    """A template and the path (relative to its package) it renders to."""

    template: str
    output: str


# ---------------------------------------------------------------------------
# Directories (relative to <package>/src)
# ---------------------------------------------------------------------------

CLIENT_SRC_DIRS: tuple[str, ...] = (
    "components/ui",
    "components/features",
    "components/layout",
    "hooks",
    "services",
    "utils",
    "types",
    "stores",
    "constants",
    "test",
)

SERVER_SRC_DIRS: tuple[str, ...] = (
    "modules/user",
    "modules/user/__tests__",
    "modules/health",
    "shared/config",
    "shared/utils",
    "shared/middlewares",
    "shared/types",
    "shared/interfaces",
)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

CLIENT_TEMPLATES: tuple[TemplateFile, ...] = (
    TemplateFile("client/vite.config.ts.j2", "vite.config.ts"),
    TemplateFile("client/vitest.config.ts.j2", "vitest.config.ts"),
    TemplateFile("client/src/types/index.ts.j2", "src/types/index.ts"),
    TemplateFile("client/src/services/api.service.ts.j2", "src/services/api.service.ts"),
    TemplateFile("client/src/services/user.service.ts.j2", "src/services/user.service.ts"),
    TemplateFile("client/src/hooks/useApi.ts.j2", "src/hooks/useApi.ts"),
    TemplateFile("client/src/constants/index.ts.j2", "src/constants/index.ts"),
    TemplateFile(
        "client/src/components/features/UserList.tsx.j2",
        "src/components/features/UserList.tsx",
    ),
    TemplateFile(
        "client/src/components/layout/Layout.tsx.j2",
        "src/components/layout/Layout.tsx",
    ),
    TemplateFile("client/src/utils/formatters.ts.j2", "src/utils/formatters.ts"),
    TemplateFile("client/env.j2", ".env"),
    TemplateFile("client/env.j2", ".env.example"),
    TemplateFile("client/src/test/setup.ts.j2", "src/test/setup.ts"),
    TemplateFile("client/src/test/App.test.tsx.j2", "src/test/App.test.tsx"),
)

SERVER_TEMPLATES: tuple[TemplateFile, ...] = (
    TemplateFile("server/rolldown.config.js.j2", "rolldown.config.js"),
    TemplateFile("server/vitest.config.ts.j2", "vitest.config.ts"),
    TemplateFile("server/src/shared/types/index.ts.j2", "src/shared/types/index.ts"),
    TemplateFile(
        "server/src/shared/interfaces/index.ts.j2", "src/shared/interfaces/index.ts"
    ),
    TemplateFile("server/src/shared/config/index.ts.j2", "src/shared/config/index.ts"),
    TemplateFile("server/src/shared/utils/logger.ts.j2", "src/shared/utils/logger.ts"),
    TemplateFile(
        "server/src/shared/utils/error-handler.ts.j2", "src/shared/utils/error-handler.ts"
    ),
    TemplateFile(
        "server/src/shared/middlewares/validation.middleware.ts.j2",
        "src/shared/middlewares/validation.middleware.ts",
    ),
    TemplateFile("server/src/modules/user/user.model.ts.j2", "src/modules/user/user.model.ts"),
    TemplateFile(
        "server/src/modules/user/user.repository.ts.j2",
        "src/modules/user/user.repository.ts",
    ),
    TemplateFile(
        "server/src/modules/user/user.service.ts.j2", "src/modules/user/user.service.ts"
    ),
    TemplateFile(
        "server/src/modules/user/user.controller.ts.j2",
        "src/modules/user/user.controller.ts",
    ),
    TemplateFile("server/src/modules/user/user.routes.ts.j2", "src/modules/user/user.routes.ts"),
    TemplateFile("server/src/modules/user/index.ts.j2", "src/modules/user/index.ts"),
    TemplateFile(
        "server/src/modules/user/__tests__/user.service.test.ts.j2",
        "src/modules/user/__tests__/user.service.test.ts",
    ),
    TemplateFile(
        "server/src/modules/user/__tests__/user.integration.test.ts.j2",
        "src/modules/user/__tests__/user.integration.test.ts",
    ),
    TemplateFile(
        "server/src/modules/health/health.controller.ts.j2",
        "src/modules/health/health.controller.ts",
    ),
    TemplateFile(
        "server/src/modules/health/health.routes.ts.j2",
        "src/modules/health/health.routes.ts",
    ),
    TemplateFile("server/src/modules/health/index.ts.j2", "src/modules/health/index.ts"),
    TemplateFile("server/src/app.ts.j2", "src/app.ts"),
    TemplateFile("server/src/index.ts.j2", "src/index.ts"),
    TemplateFile("server/env.j2", ".env"),
    TemplateFile("server/env.j2", ".env.example"),
)

ROOT_TEMPLATES: tuple[TemplateFile, ...] = (
    TemplateFile("root/gitignore.j2", ".gitignore"),
    TemplateFile("root/README.md.j2", "README.md"),
)


# ---------------------------------------------------------------------------
# Client manifest patches (merged over what Vite wrote)
# ---------------------------------------------------------------------------

CLIENT_MANIFEST_PATCH: dict[str, Any] = {
    "scripts": {
        "test": "vitest",
        "test:ui": "vitest --ui",
        "test:coverage": "vitest --coverage",
    },
    "devDependencies": {
        "@testing-library/react": "^14.1.2",
        "@testing-library/jest-dom": "^6.1.5",
        "@testing-library/user-event": "^14.5.1",
        "@vitest/ui": "^1.0.4",
        "@vitest/coverage-v8": "^1.0.4",
        "jsdom": "^23.0.1",
        "vitest": "^1.0.4",
    },
}

CLIENT_TSCONFIG_PATCH: dict[str, Any] = {
    "compilerOptions": {
        "baseUrl": ".",
        "paths": {
            "@/*": ["src/*"],
            "@components/*": ["src/components/*"],
            "@hooks/*": ["src/hooks/*"],
            "@services/*": ["src/services/*"],
            "@utils/*": ["src/utils/*"],
            "@types/*": ["src/types/*"],
            "@stores/*": ["src/stores/*"],
            "@constants/*": ["src/constants/*"],
        },
    },
}


# ---------------------------------------------------------------------------
# Manifests created from scratch
# ---------------------------------------------------------------------------

def server_manifest(project_name: str) -> dict[str, Any]:
    """``server/package.json`` for the Express backend."""
    return {
        "name": f"{project_name}-server",
        "version": "1.0.0",
        "type": "module",
        "scripts": {
            "dev": "tsx watch src/index.ts",
            "build": "rolldown -c rolldown.config.js",
            "start": "node dist/index.js",
            "test": "vitest",
            "test:ui": "vitest --ui",
            "test:coverage": "vitest --coverage",
        },
        "dependencies": {
            "express": "^4.18.2",
            "cors": "^2.8.5",
            "dotenv": "^16.3.1",
            "picocolors": "^1.0.0",
        },
        "devDependencies": {
            "@types/express": "^4.17.21",
            "@types/cors": "^2.8.17",
            "@types/node": "^20.10.0",
            "@types/supertest": "^6.0.2",
            "typescript": "^5.3.3",
            "tsx": "^4.7.0",
            "rolldown": "^0.15.1",
            "vitest": "^1.0.4",
            "supertest": "^6.3.3",
            "@vitest/coverage-v8": "^1.0.4",
        },
    }


def server_tsconfig() -> dict[str, Any]:
    """``server/tsconfig.json`` with the ``@modules``/``@shared`` aliases."""
    return {
        "compilerOptions": {
            "target": "ES2022",
            "module": "ESNext",
            "moduleResolution": "bundler",
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
            "types": ["vitest/globals", "node"],
            "baseUrl": ".",
            "paths": {
                "@/*": ["src/*"],
                "@modules/*": ["src/modules/*"],
                "@shared/*": ["src/shared/*"],
            },
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist"],
    }


def root_manifest(project_name: str) -> dict[str, Any]:
    """Root ``package.json`` with the cross-package scripts."""
    return {
        "name": project_name,
        "version": "1.0.0",
        "private": True,
        "scripts": {
            "dev:client": f"cd {CLIENT_DIR} && npm run dev",
            "dev:server": f"cd {SERVER_DIR} && npm run dev",
            "dev": 'concurrently "npm run dev:server" "npm run dev:client"',
            "test:client": f"cd {CLIENT_DIR} && npm test",
            "test:server": f"cd {SERVER_DIR} && npm test",
            "test": "npm run test:server && npm run test:client",
            "install:all": (
                f"npm install && cd {CLIENT_DIR} && npm install"
                f" && cd ../{SERVER_DIR} && npm install"
            ),
            "lint": "eslint . --ext .ts,.tsx",
            "lint:fix": "eslint . --ext .ts,.tsx --fix",
            "format": 'prettier --write "**/*.{ts,tsx,json,md}"',
            "prepare": "husky install",
        },
        "devDependencies": {
            "concurrently": "^8.2.2",
            "@typescript-eslint/eslint-plugin": "^6.21.0",
            "@typescript-eslint/parser": "^6.21.0",
            "eslint": "^8.56.0",
            "prettier": "^3.2.4",
            "husky": "^8.0.3",
            "lint-staged": "^15.2.0",
        },
    }


def eslint_config() -> dict[str, Any]:
    """Root ``.eslintrc.json``."""
    return {
        "root": True,
        "extends": ["eslint:recommended", "plugin:@typescript-eslint/recommended"],
        "parser": "@typescript-eslint/parser",
        "plugins": ["@typescript-eslint"],
        "ignorePatterns": ["dist", "build", "node_modules"],
    }


def prettier_config() -> dict[str, Any]:
    """Root ``.prettierrc.json``."""
    return {
        "semi": True,
        "trailingComma": "es5",
        "singleQuote": True,
        "printWidth": 80,
        "tabWidth": 2,
        "useTabs": False,
    }
